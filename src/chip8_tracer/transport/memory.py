# chip8_tracer/transport/memory.py
"""
Transport Layer (メモリ)

このモジュールは、CHIP-8の4096バイトのアドレス空間を表現し、
全ての読み書きアクセスに対して範囲チェックを行う責務を負います。
"""
from typing import Iterable, List

from chip8_tracer.common.errors import AddressOutOfRangeError

# @intent:constant CHIP-8のメモリサイズ（4KB）。
MEMORY_SIZE = 4096

# @intent:responsibility 範囲チェック付きのバイトアドレス空間を提供します。
class Memory:
    """
    CHIP-8のメインメモリ。
    範囲外アクセスはインデックスの切り詰めではなく AddressOutOfRangeError として報告されます。
    """
    # @intent:responsibility 指定されたサイズのゼロ初期化されたメモリ領域を確保します。
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Memory size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size

    # @intent:responsibility アドレスが有効範囲内であることを検証します。
    def _check_address(self, address: int) -> None:
        if not 0 <= address < self._size:
            raise AddressOutOfRangeError(address, self._size)

    # @intent:responsibility [address, address + length) の全体が有効範囲内であることを検証します。
    # @intent:rationale 複数バイト書き込みを開始する前に検証し、失敗時にメモリを一切変更しないようにします。
    def _check_range(self, address: int, length: int) -> None:
        if length <= 0:
            self._check_address(address)
            return
        self._check_address(address)
        self._check_address(address + length - 1)

    def read(self, address: int) -> int:
        """
        指定されたアドレスから8bitのデータを読み出します。
        """
        self._check_address(address)
        return self._memory[address]

    def write(self, address: int, data: int) -> None:
        """
        指定されたアドレスに8bitのデータを書き込みます。
        """
        self._check_address(address)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[address] = data

    # @intent:utility_function 16ビットワードをビッグエンディアン形式で読み込みます。
    def read_word(self, address: int) -> int:
        """Big-endian 16-bit read."""
        self._check_range(address, 2)
        return (self._memory[address] << 8) | self._memory[address + 1]

    def read_block(self, address: int, length: int) -> List[int]:
        """
        address から length バイトを読み出してリストで返します。
        """
        if length == 0:
            return []
        self._check_range(address, length)
        return list(self._memory[address:address + length])

    def write_block(self, address: int, data: Iterable[int]) -> None:
        """
        address から連続してバイト列を書き込みます。
        範囲と値は書き込み開始前に全て検証されます。
        """
        values = bytes(data)  # 0-255の範囲外はここでValueErrorになる
        if not values:
            return
        self._check_range(address, len(values))
        self._memory[address:address + len(values)] = values

    # @intent:responsibility 指定範囲をゼロで埋めます。
    def clear(self, start: int = 0, end: int = None) -> None:
        end = self._size if end is None else end
        if start == end:
            return
        self._check_range(start, end - start)
        self._memory[start:end] = bytes(end - start)

    def get_size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size
