import logging

from chip8_tracer.core.cpu import Chip8Cpu
from chip8_tracer.loader.loader import RomLoader
from .models import EmulatorConfig

logger = logging.getLogger(__name__)

# @intent:responsibility 設定（Config）に基づいてインタプリタを生成し、ROMをロードします。
class SystemBuilder:
    def __init__(self, rom_loader: RomLoader = None):
        self._rom_loader = rom_loader or RomLoader()

    def build_system(self, config: EmulatorConfig) -> Chip8Cpu:
        cpu = Chip8Cpu(debug_enabled=config.debug_enabled)

        if config.rom_path:
            self._rom_loader.load_rom(config.rom_path, cpu)
        else:
            logger.warning("No ROM configured; memory above 0x200 is empty")

        return cpu
