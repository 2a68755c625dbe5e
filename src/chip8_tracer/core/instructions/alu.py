"""
算術論理演算命令の実装。

フラグ規約について:
    SUB / SUBN はボローが発生した場合に VF=1 をセットします（一般的なCHIP-8の資料とは逆の極性）。
    SHL は VF に VX & 0x80 をそのまま格納し、0/1への正規化は行いません。
    いずれも既存ROMとの互換性確認が取れるまで、この挙動を維持します。
"""
from chip8_tracer.common.types import KeypadSnapshot
from chip8_tracer.core.instruction import Instruction
from chip8_tracer.core.state import Chip8State
from .base import make_instruction, reg, byte

# --- ADD Vx, byte (7XNN) ---
def decode_add_imm(opcode: int) -> Instruction:
    return make_instruction(opcode, "ADD_IMM", "ADD", reg((opcode >> 8) & 0xF), byte(opcode & 0xFF))

# @intent:responsibility VXに即値を加算します。キャリーフラグは更新しません。
def execute_add_imm(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF
    state.advance_pc()

# --- OR / AND / XOR (8XY1-8XY3) ---
def decode_or(opcode: int) -> Instruction:
    return make_instruction(opcode, "OR", "OR", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

def execute_or(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.v[op.x] = state.v[op.x] | state.v[op.y]
    state.advance_pc()

def decode_and(opcode: int) -> Instruction:
    return make_instruction(opcode, "AND", "AND", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

def execute_and(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.v[op.x] = state.v[op.x] & state.v[op.y]
    state.advance_pc()

def decode_xor(opcode: int) -> Instruction:
    return make_instruction(opcode, "XOR", "XOR", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

def execute_xor(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.v[op.x] = state.v[op.x] ^ state.v[op.y]
    state.advance_pc()

# --- ADD Vx, Vy (8XY4) ---
def decode_add_reg(opcode: int) -> Instruction:
    return make_instruction(opcode, "ADD_REG", "ADD", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

# @intent:responsibility VX += VY を実行し、8ビットを超えた場合にVF=1とします。
def execute_add_reg(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    res = state.v[op.x] + state.v[op.y]
    state.v[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0
    state.advance_pc()

# --- SUB Vx, Vy (8XY5) ---
def decode_sub(opcode: int) -> Instruction:
    return make_instruction(opcode, "SUB", "SUB", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

# @intent:responsibility VX -= VY を実行し、ボロー発生時（VX < VY）にVF=1とします。
def execute_sub(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v1 - v2) & 0xFF
    state.vf = 1 if v1 < v2 else 0  # Borrow
    state.advance_pc()

# --- SHR Vx (8XY6) ---
def decode_shr(opcode: int) -> Instruction:
    return make_instruction(opcode, "SHR", "SHR", reg((opcode >> 8) & 0xF))

# @intent:responsibility VFに最下位ビットを格納してから、VXを1ビット右シフトします。
def execute_shr(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.vf = state.v[op.x] & 0x01
    # VF書き込み後にVXを読み直す（X=Fの場合はフラグ値がシフトされる）
    state.v[op.x] = state.v[op.x] >> 1
    state.advance_pc()

# --- SUBN Vx, Vy (8XY7) ---
def decode_subn(opcode: int) -> Instruction:
    return make_instruction(opcode, "SUBN", "SUBN", reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF))

# @intent:responsibility VX = VY - VX を実行し、ボロー発生時（VY < VX）にVF=1とします。
def execute_subn(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    v1 = state.v[op.y]
    v2 = state.v[op.x]
    state.v[op.x] = (v1 - v2) & 0xFF
    state.vf = 1 if v1 < v2 else 0  # Borrow
    state.advance_pc()

# --- SHL Vx (8XYE) ---
def decode_shl(opcode: int) -> Instruction:
    return make_instruction(opcode, "SHL", "SHL", reg((opcode >> 8) & 0xF))

# @intent:responsibility VFに最上位ビット（0x80のまま）を格納してから、VXを1ビット左シフトします。
def execute_shl(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.vf = state.v[op.x] & 0x80
    state.v[op.x] = (state.v[op.x] << 1) & 0xFF
    state.advance_pc()

# --- RND Vx, byte (CXNN) ---
def decode_rnd(opcode: int) -> Instruction:
    return make_instruction(opcode, "RND", "RND", reg((opcode >> 8) & 0xF), byte(opcode & 0xFF))

# @intent:responsibility ランダムな1バイトとNNの論理積をVXに格納します。
def execute_rnd(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.v[op.x] = state.rng.randrange(0x100) & op.nn
    state.advance_pc()

# --- ADD I, Vx (FX1E) ---
def decode_add_i(opcode: int) -> Instruction:
    return make_instruction(opcode, "ADD_I", "ADD", "I", reg((opcode >> 8) & 0xF))

# @intent:responsibility I += VX を12ビットで実行します。桁あふれは報告せずに切り捨てます。
def execute_add_i(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFF
    state.advance_pc()
