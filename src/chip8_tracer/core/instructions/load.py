"""
ロード/ストア命令（レジスタ、インデックス、タイマー、メモリ転送）の実装。
"""
from chip8_tracer.common.errors import UnknownOpcodeError
from chip8_tracer.common.types import KeypadSnapshot
from chip8_tracer.core.font import FONT_START, GLYPH_SIZE
from chip8_tracer.core.instruction import Instruction
from chip8_tracer.core.state import Chip8State
from .base import make_instruction, reg, addr, byte

# FX29 が参照できるグリフの最大値
MAX_SPRITE_DIGIT = 0x8

# --- LD Vx, byte (6XNN) ---
def decode_ld_imm(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_IMM", "LD", reg((opcode >> 8) & 0xF), byte(opcode & 0xFF))

def execute_ld_imm(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.v[op.x] = op.nn
    state.advance_pc()

# --- LD Vx, Vy (8XY0) ---
def decode_ld_reg(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_REG", "LD", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

def execute_ld_reg(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.v[op.x] = state.v[op.y]
    state.advance_pc()

# --- LD I, addr (ANNN) ---
def decode_ld_i(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_I", "LD", "I", addr(opcode & 0xFFF))

def execute_ld_i(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.i = op.nnn
    state.advance_pc()

# --- LD Vx, DT (FX07) ---
def decode_ld_vx_dt(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_VX_DT", "LD", reg((opcode >> 8) & 0xF), "DT")

def execute_ld_vx_dt(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.v[op.x] = state.delay_timer
    state.advance_pc()

# --- LD DT, Vx (FX15) ---
def decode_ld_dt_vx(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_DT_VX", "LD", "DT", reg((opcode >> 8) & 0xF))

def execute_ld_dt_vx(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.delay_timer = state.v[op.x]
    state.advance_pc()

# --- LD ST, Vx (FX18) ---
def decode_ld_st_vx(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_ST_VX", "LD", "ST", reg((opcode >> 8) & 0xF))

def execute_ld_st_vx(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.sound_timer = state.v[op.x]
    state.advance_pc()

# --- LD F, Vx (FX29) ---
def decode_ld_f(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_F", "LD", "F", reg((opcode >> 8) & 0xF))

# @intent:responsibility IにVXの数字グリフのアドレスを設定します。
# @intent:pre-condition VXは0-8である必要があります。それ以外は UnknownOpcodeError となり、状態は変更されません。
def execute_ld_f(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    digit = state.v[op.x]
    if digit > MAX_SPRITE_DIGIT:
        raise UnknownOpcodeError(op.opcode)
    state.i = FONT_START + digit * GLYPH_SIZE
    state.advance_pc()

# --- LD B, Vx (FX33) ---
def decode_ld_b(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_B", "LD", "B", reg((opcode >> 8) & 0xF))

# @intent:responsibility VXを10進3桁（百・十・一の位）に分解し、I, I+1, I+2 に格納します。
def execute_ld_b(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    value = state.v[op.x]
    hundreds = value // 100
    tens = (value % 100) // 10
    units = value % 10
    state.memory.write_block(state.i, [hundreds, tens, units])
    state.advance_pc()

# --- LD [I], Vx (FX55) ---
def decode_ld_dump(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_DUMP", "LD", "[I]", reg((opcode >> 8) & 0xF))

# @intent:responsibility V0からVX（VXを含む）までをIから始まるメモリへ書き出します。
def execute_ld_dump(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.memory.write_block(state.i, state.v[:op.x + 1])
    state.advance_pc()

# --- LD Vx, [I] (FX65) ---
def decode_ld_load(opcode: int) -> Instruction:
    return make_instruction(opcode, "LD_LOAD", "LD", reg((opcode >> 8) & 0xF), "[I]")

# @intent:responsibility Iから始まるメモリをV0からVX（VXを含む）へ読み込みます。
def execute_ld_load(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    values = state.memory.read_block(state.i, op.x + 1)
    state.v[:op.x + 1] = values
    state.advance_pc()
