"""
キーパッド入力命令の実装。

キーパッドのスナップショットはサイクルごとにホストから渡され、命令はそれを読むだけです。
"""
from chip8_tracer.common.errors import InvalidKeyError
from chip8_tracer.common.types import KEYPAD_SIZE, KeypadSnapshot
from chip8_tracer.core.instruction import Instruction
from chip8_tracer.core.state import Chip8State
from .base import make_instruction, reg

# @intent:utility_function VXをキー番号として解釈します。
# @intent:pre-condition VXは0x0-0xFである必要があります。それ以外は InvalidKeyError となり、PCは変更されません。
def _key_index(state: Chip8State, op: Instruction) -> int:
    key = state.v[op.x]
    if key >= KEYPAD_SIZE:
        raise InvalidKeyError(key, op.opcode)
    return key

# --- SKP Vx (EX9E) ---
def decode_skp(opcode: int) -> Instruction:
    return make_instruction(opcode, "SKP", "SKP", reg((opcode >> 8) & 0xF))

def execute_skp(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.skip_if(keypad[_key_index(state, op)])
    state.advance_pc()

# --- SKNP Vx (EXA1) ---
def decode_sknp(opcode: int) -> Instruction:
    return make_instruction(opcode, "SKNP", "SKNP", reg((opcode >> 8) & 0xF))

def execute_sknp(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.skip_if(not keypad[_key_index(state, op)])
    state.advance_pc()

# --- LD Vx, K (FX0A) ---
def decode_ld_vx_k(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_VX_K", "LD", reg((opcode >> 8) & 0xF), "K")

# @intent:responsibility いずれかのキーが押されている場合のみPCを進めます。
# @intent:rationale コア内部でブロックせず、ホストが同じPCで再度cycleを呼ぶことで入力待ちを表現します。
def execute_ld_vx_k(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    if any(keypad):
        state.advance_pc()
