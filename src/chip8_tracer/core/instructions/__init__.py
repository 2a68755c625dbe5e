"""
CHIP-8命令セット実装パッケージ。
"""
from chip8_tracer.common.errors import UnknownOpcodeError
from chip8_tracer.common.types import KeypadSnapshot
from chip8_tracer.core.instruction import Instruction
from chip8_tracer.core.state import Chip8State
from .maps import DECODE_MAP, SUB_DECODE_MAPS, EXECUTE_MAP

# @intent:responsibility CHIP-8のオペコードをデコードします。
def decode_opcode(opcode: int) -> Instruction:
    """
    16ビットのオペコードを上位4ビットで分類し、必要に応じて下位バイト/ニブルで
    2段目のディスパッチを行い、Instructionオブジェクトを返します。
    該当する命令がない場合は UnknownOpcodeError を送出します。
    """
    family = (opcode >> 12) & 0xF
    if family in SUB_DECODE_MAPS:
        select, table = SUB_DECODE_MAPS[family]
        decoder = table.get(select(opcode))
    else:
        decoder = DECODE_MAP.get(family)
    if decoder is None:
        raise UnknownOpcodeError(opcode)
    return decoder(opcode)

# @intent:responsibility デコードされたCHIP-8命令を実行します。
def execute_instruction(instruction: Instruction, state: Chip8State, keypad: KeypadSnapshot) -> None:
    """
    デコードされた命令を実行し、CPUの状態を変更します。
    """
    executor = EXECUTE_MAP.get(instruction.key)
    if executor is None:
        raise UnknownOpcodeError(instruction.opcode)
    executor(state, keypad, instruction)
