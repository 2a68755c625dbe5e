"""
画面命令（クリア、スプライト描画）の実装。
"""
from chip8_tracer.common.types import KeypadSnapshot
from chip8_tracer.core.instruction import Instruction
from chip8_tracer.core.state import Chip8State, DISPLAY_WIDTH, FRAMEBUFFER_SIZE
from .base import make_instruction, reg

SPRITE_WIDTH = 8

# --- CLS (00E0) ---
def decode_cls(opcode: int) -> Instruction:
    return make_instruction(opcode, "CLS", "CLS")

# @intent:responsibility フレームバッファの全セルをクリアします。
def execute_cls(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    state.clear_screen()
    state.advance_pc()

# --- DRW Vx, Vy, nibble (DXYN) ---
def decode_drw(opcode: int) -> Instruction:
    return make_instruction(opcode, "DRW", "DRW",
                            reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF), str(opcode & 0xF))

# @intent:responsibility N行のスプライトを (VX, VY) にXOR描画し、衝突をVFに記録します。
# @intent:rationale 座標は画面端でクリップせず、フレームバッファ全体（2048セル）で折り返します。
def execute_drw(state: Chip8State, keypad: KeypadSnapshot, op: Instruction) -> None:
    x = state.v[op.x]
    y = state.v[op.y]
    # 範囲外のスプライト読み込みは描画開始前に失敗させる
    rows = state.memory.read_block(state.i, op.n)

    state.vf = 0
    for y_row, sprite in enumerate(rows):
        for x_col in range(SPRITE_WIDTH):
            if sprite & (0x80 >> x_col):
                location = (x + x_col + (y + y_row) * DISPLAY_WIDTH) % FRAMEBUFFER_SIZE
                if state.framebuffer[location]:
                    state.vf = 1
                state.framebuffer[location] = not state.framebuffer[location]
    state.advance_pc()
