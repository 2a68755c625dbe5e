# chip8_tracer/core/instruction.py
"""
デコード済み命令の不変レコード

フェッチした16ビットワードから取り出したオペランドフィールドを保持し、
命令実行関数へ明示的に渡されます。
"""
from dataclasses import dataclass, field
from typing import List

# @intent:responsibility デコード済みの1命令（ファミリ・オペランド・表示用ニーモニック）を記録します。
@dataclass(frozen=True) # 不変データ構造
class Instruction:
    """
    デコードされたCHIP-8命令。
    オペランドフィールドは全命令で固定位置にあるため、デコード時に一度だけ抽出します。
    """
    opcode: int # 例: 0x6005
    key: str # 実行テーブルのキー 例: "LD_IMM"
    mnemonic: str # 例: "LD"
    operands: List[str] = field(default_factory=list) # 例: ["V0", "0x05"]

    @property
    def x(self) -> int:
        return (self.opcode >> 8) & 0xF

    @property
    def y(self) -> int:
        return (self.opcode >> 4) & 0xF

    @property
    def n(self) -> int:
        return self.opcode & 0xF

    @property
    def nn(self) -> int:
        return self.opcode & 0xFF

    @property
    def nnn(self) -> int:
        return self.opcode & 0xFFF

    @property
    def family(self) -> int:
        return (self.opcode >> 12) & 0xF

    def __str__(self) -> str:
        text = self.mnemonic
        if self.operands:
            text += " " + ", ".join(self.operands)
        return text
