from dataclasses import dataclass, field
from typing import Dict, Optional

# @intent:constant ホストキーボードの左側4x4をCHIP-8のキーパッドに割り当てる既定のキーマップ。
#   | 1 | 2 | 3 | C |      1 2 3 4
#   | 4 | 5 | 6 | D |  <-  q w e r
#   | 7 | 8 | 9 | E |      a s d f
#   | A | 0 | B | F |      z x c v
DEFAULT_KEYMAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "q": 0x4, "w": 0x5, "e": 0x6, "r": 0xD,
    "a": 0x7, "s": 0x8, "d": 0x9, "f": 0xE,
    "z": 0xA, "x": 0x0, "c": 0xB, "v": 0xF,
}

@dataclass
class EmulatorConfig:
    rom_path: Optional[str] = None
    debug_enabled: bool = False
    cycle_interval_ms: int = 16  # 60Hz
    display_scale: int = 10
    keymap: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
    quit_key: str = "p"
