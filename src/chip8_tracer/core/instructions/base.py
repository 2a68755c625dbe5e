"""
CHIP-8命令実装用の共通ユーティリティ。
"""
from chip8_tracer.core.instruction import Instruction

# @intent:utility_function レジスタ番号を表示用の名前に変換します。
def reg(index: int) -> str:
    return f"V{index:X}"

# @intent:utility_function 12ビットアドレスを表示用に整形します。
def addr(value: int) -> str:
    return f"0x{value:03X}"

# @intent:utility_function 8ビット即値を表示用に整形します。
def byte(value: int) -> str:
    return f"0x{value:02X}"

# @intent:utility_function 命令キーとニーモニックからInstructionを生成します。
def make_instruction(opcode: int, key: str, mnemonic: str, *operands: str) -> Instruction:
    return Instruction(opcode=opcode, key=key, mnemonic=mnemonic, operands=list(operands))
