# chip8_tracer/core/cpu.py
"""
Core Layer (CHIP-8 インタプリタ)

このモジュールは、フェッチ・デコード・実行・タイマー減算からなる命令サイクルを駆動します。
具体的な命令の振る舞いは Instruction Layer (core.instructions) に委譲されます。
"""
import logging
import random
from typing import Dict, List, Optional

from chip8_tracer.common.errors import AddressOutOfRangeError
from chip8_tracer.common.types import Keypad, RegisterInfo, RegisterLayoutInfo, normalize_keypad
from chip8_tracer.core.instruction import Instruction
from chip8_tracer.core.instructions import decode_opcode, execute_instruction
from chip8_tracer.core.state import Chip8State, PROGRAM_START
from chip8_tracer.core.trace import DebugTrace

logger = logging.getLogger(__name__)

# @intent:constant プログラム領域に格納できるROMの最大サイズ。
MAX_ROM_SIZE = 4096 - PROGRAM_START

# @intent:responsibility CHIP-8の状態を所有し、1サイクルずつ実行します。
class Chip8Cpu:
    """
    CHIP-8インタプリタ。
    ホストはスケジューリングの1ティックごとに cycle() をキーパッドのスナップショットと共に呼び出します。
    実行速度（サイクル/秒）はホスト側の責務です。
    """
    # @intent:responsibility 初期状態（フォント配置済み、PC=0x200）を生成します。
    def __init__(self, debug_enabled: bool = False, rng: Optional[random.Random] = None):
        self._rng = rng
        self._state: Chip8State = self._create_initial_state()
        self._cycle_count: int = 0
        self.trace = DebugTrace(enabled=debug_enabled)
        logger.info("CHIP-8 interpreter initialized (debug=%s)", debug_enabled)

    # @intent:responsibility 診断トレースの有効/無効を切り替えます。
    @property
    def debug_enabled(self) -> bool:
        return self.trace.enabled

    @debug_enabled.setter
    def debug_enabled(self, enabled: bool) -> None:
        self.trace.enabled = enabled

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    def _create_initial_state(self) -> Chip8State:
        if self._rng is not None:
            return Chip8State(rng=self._rng)
        return Chip8State()

    # @intent:responsibility 状態を初期値に戻します。ロード済みのROMも消去されます。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._cycle_count = 0
        self.trace.clear()

    # @intent:responsibility 現在の状態を返します。
    def get_state(self) -> Chip8State:
        return self._state

    # @intent:responsibility レンダリング側へフレームバッファ（行優先、上の行から）を公開します。
    @property
    def framebuffer(self) -> List[bool]:
        return list(self._state.framebuffer)

    # @intent:responsibility ROMのバイト列をアドレス0x200からそのまま配置します。
    # @intent:pre-condition ROMがメモリに収まらない場合は AddressOutOfRangeError となり、メモリは変更されません。
    def load(self, rom: bytes) -> None:
        data = bytes(rom)
        if len(data) > MAX_ROM_SIZE:
            raise AddressOutOfRangeError(PROGRAM_START + len(data) - 1)
        memory = self._state.memory
        memory.clear(PROGRAM_START)
        memory.write_block(PROGRAM_START, data)
        self.trace.append("ROM loaded into memory")
        logger.info("Loaded %d byte ROM at 0x%03X", len(data), PROGRAM_START)

    # @intent:responsibility 現在のPCから命令ワードをフェッチします。
    def _fetch(self) -> int:
        return self._state.memory.read_word(self._state.pc)

    # @intent:responsibility 1命令サイクルを実行し、実行したオペコードを返します。
    # @intent:flow フェッチ -> デコード -> 実行 -> トレース記録 -> タイマー減算 の順序で処理を行います。
    #              失敗時は例外をそのまま呼び出し元へ伝播させ、トレース記録とタイマー減算は行いません。
    def cycle(self, keypad: Keypad) -> int:
        snapshot = normalize_keypad(keypad)
        state = self._state
        initial_pc = state.pc

        state.opcode = self._fetch()
        instruction = decode_opcode(state.opcode)
        execute_instruction(instruction, state, snapshot)

        self._cycle_count += 1
        if self.trace.enabled:
            self.trace.append(self._describe(initial_pc, instruction))

        state.tick_timers()
        return state.opcode

    # @intent:responsibility トレース用に実行した命令の1行要約を生成します。
    def _describe(self, initial_pc: int, instruction: Instruction) -> str:
        line = f"0x{initial_pc:04X}  {instruction.opcode:04X}  {instruction}"
        if instruction.key == "LD_VX_K" and self._state.pc == initial_pc:
            line += "  ; waiting for key press"
        return line

    # @intent:responsibility UI表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{n:X}": value for n, value in enumerate(s.v)}
        registers.update({
            "I": s.i, "PC": s.pc, "SP": len(s.stack), "DT": s.delay_timer, "ST": s.sound_timer
        })
        return registers

    # @intent:responsibility UIのレジスタ表示レイアウト（グループ化）を定義します。
    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        return [
            RegisterLayoutInfo("General", [RegisterInfo(f"V{n:X}", 8) for n in range(16)]),
            RegisterLayoutInfo("Index/Pointers", [
                RegisterInfo("I", 16), RegisterInfo("PC", 16), RegisterInfo("SP", 8)
            ]),
            RegisterLayoutInfo("Timers", [
                RegisterInfo("DT", 8), RegisterInfo("ST", 8)
            ]),
        ]
