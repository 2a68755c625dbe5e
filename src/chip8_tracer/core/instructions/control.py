"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。
"""
from chip8_tracer.common.errors import StackUnderflowError
from chip8_tracer.common.types import KeypadSnapshot
from chip8_tracer.core.instruction import Instruction
from chip8_tracer.core.state import Chip8State
from .base import make_instruction, reg, addr, byte

# --- RET (00EE) ---
# @intent:responsibility RET (Return from Subroutine) 命令をデコードします。
def decode_ret(opcode: int) -> Instruction:
    return make_instruction(opcode, "RET", "RET")

# @intent:responsibility スタックから戻りアドレスをポップし、CALL命令の次へ進めます。
# @intent:pre-condition スタックが空の場合は StackUnderflowError となり、状態は変更されません。
def execute_ret(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    if not state.stack:
        raise StackUnderflowError(state.pc)
    # スタックにはCALL命令自身のアドレスが積まれている
    state.pc = state.stack.pop()
    state.advance_pc()

# --- JP (1NNN) ---
def decode_jp(opcode: int) -> Instruction:
    return make_instruction(opcode, "JP", "JP", addr(opcode & 0xFFF))

# @intent:responsibility PCをNNNへ設定します（PCは進めません）。
def execute_jp(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.pc = op.nnn

# --- CALL (2NNN) ---
def decode_call(opcode: int) -> Instruction:
    return make_instruction(opcode, "CALL", "CALL", addr(opcode & 0xFFF))

# @intent:responsibility 現在のPCをプッシュしてからNNNへジャンプします。
def execute_call(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.stack.append(state.pc)
    state.pc = op.nnn

# --- SE Vx, byte (3XNN) ---
def decode_se_imm(opcode: int) -> Instruction:
    return make_instruction(opcode, "SE_IMM", "SE", reg((opcode >> 8) & 0xF), byte(opcode & 0xFF))

# @intent:responsibility VX == NN の場合に次の命令をスキップします。
def execute_se_imm(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.skip_if(state.v[op.x] == op.nn)
    state.advance_pc()

# --- SNE Vx, byte (4XNN) ---
def decode_sne_imm(opcode: int) -> Instruction:
    return make_instruction(opcode, "SNE_IMM", "SNE", reg((opcode >> 8) & 0xF), byte(opcode & 0xFF))

# @intent:responsibility VX != NN の場合に次の命令をスキップします。
def execute_sne_imm(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.skip_if(state.v[op.x] != op.nn)
    state.advance_pc()

# --- SE Vx, Vy (5XY0) ---
def decode_se_reg(opcode: int) -> Instruction:
    return make_instruction(opcode, "SE_REG", "SE", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

def execute_se_reg(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.skip_if(state.v[op.x] == state.v[op.y])
    state.advance_pc()

# --- SNE Vx, Vy (9XY0) ---
def decode_sne_reg(opcode: int) -> Instruction:
    return make_instruction(opcode, "SNE_REG", "SNE", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

def execute_sne_reg(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.skip_if(state.v[op.x] != state.v[op.y])
    state.advance_pc()

# --- JP V0, addr (BNNN) ---
def decode_jp_v0(opcode: int) -> Instruction:
    return make_instruction(opcode, "JP_V0", "JP", "V0", addr(opcode & 0xFFF))

# @intent:responsibility PCを NNN + V0 へ設定します。
# @intent:rationale 結果が4095を超えた場合、次のフェッチで AddressOutOfRangeError として報告されます。
def execute_jp_v0(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.pc = op.nnn + state.v[0]
