# chip8_tracer/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CHIP-8のアーキテクチャ状態（メモリ、レジスタ、スタック、
タイマー、フレームバッファ）を保持するデータ構造を定義します。
"""
import random
from dataclasses import dataclass, field
from typing import List

from chip8_tracer.core.font import FONT_SET, FONT_START
from chip8_tracer.transport.memory import Memory, MEMORY_SIZE

# @intent:constant CHIP-8の固定ジオメトリ。
PROGRAM_START = 0x200
REGISTER_COUNT = 16
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
FRAMEBUFFER_SIZE = DISPLAY_WIDTH * DISPLAY_HEIGHT
VF = 0xF

# @intent:utility_function フォントをアドレス0に配置したメモリを生成します。
def _memory_with_font() -> Memory:
    memory = Memory(MEMORY_SIZE)
    memory.write_block(FONT_START, FONT_SET)
    return memory

# @intent:responsibility CHIP-8の全てのアーキテクチャ状態を保持します。
# @intent:rationale インタプリタが唯一の所有者であり、全ての命令はこのオブジェクトを明示的に受け取って変更します。
@dataclass
class Chip8State:
    """
    CHIP-8のレジスタ・メモリ・画面状態を保持するデータクラス。
    """
    memory: Memory = field(default_factory=_memory_with_font)
    pc: int = PROGRAM_START  # Program Counter
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)  # V0-VF
    i: int = 0x000  # Index Register (12-bit)
    framebuffer: List[bool] = field(default_factory=lambda: [False] * FRAMEBUFFER_SIZE)
    delay_timer: int = 0
    sound_timer: int = 0
    stack: List[int] = field(default_factory=list)
    opcode: int = 0x0000  # 直近にフェッチした命令ワード
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    # @intent:accessor フラグレジスタVFへのアクセスを提供します。
    @property
    def vf(self) -> int:
        return self.v[VF]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[VF] = value & 0xFF

    # @intent:responsibility 通常の命令完了時にPCを次の命令へ進めます。
    def advance_pc(self) -> None:
        self.pc = (self.pc + 2) & 0xFFFF

    # @intent:responsibility スキップ命令の条件が成立した場合に次の命令を飛ばします。
    def skip_if(self, condition: bool) -> None:
        if condition:
            self.advance_pc()

    # @intent:responsibility 1サイクル分タイマーを減算します。0未満にはなりません。
    def tick_timers(self) -> None:
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1

    def clear_screen(self) -> None:
        for index in range(FRAMEBUFFER_SIZE):
            self.framebuffer[index] = False

    def pixel(self, x: int, y: int) -> bool:
        """(x, y) のピクセル値。座標は画面サイズで折り返されます。"""
        return self.framebuffer[(x % DISPLAY_WIDTH) + (y % DISPLAY_HEIGHT) * DISPLAY_WIDTH]
