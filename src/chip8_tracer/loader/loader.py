# chip8_tracer/loader/loader.py
"""
ROMローダーモジュール。
CHIP-8のROMファイル（生バイナリ）を読み込み、インタプリタへ渡します。
"""
import logging
from pathlib import Path

from chip8_tracer.core.cpu import Chip8Cpu, MAX_ROM_SIZE

logger = logging.getLogger(__name__)

class RomLoader:
    """
    ROMファイルを読み込み、Chip8Cpu.load() に渡すローダー。
    """
    def read_rom(self, file_path: str) -> bytes:
        data = Path(file_path).read_bytes()
        if not data:
            raise ValueError(f"ROM file is empty: {file_path}")
        if len(data) > MAX_ROM_SIZE:
            raise ValueError(
                f"ROM file {file_path} is {len(data)} bytes; at most {MAX_ROM_SIZE} bytes fit above 0x200"
            )
        return data

    def load_rom(self, file_path: str, cpu: Chip8Cpu) -> int:
        data = self.read_rom(file_path)
        cpu.load(data)
        logger.info("Loaded ROM %s", file_path)
        return len(data)
