import yaml
from typing import Dict, Any
from .models import EmulatorConfig, DEFAULT_KEYMAP

class ConfigLoader:
    def load_from_file(self, path: str) -> EmulatorConfig:
        with open(path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> EmulatorConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        interval = self._parse_int(data.get("cycle_interval_ms", 16))
        if interval <= 0:
            raise ValueError(f"cycle_interval_ms must be positive: {interval}")

        scale = self._parse_int(data.get("display_scale", 10))
        if scale <= 0:
            raise ValueError(f"display_scale must be positive: {scale}")

        # Parse Keymap
        keymap_data = data.get("keymap")
        if keymap_data is None:
            keymap = dict(DEFAULT_KEYMAP)
        else:
            keymap = {}
            for key, index in keymap_data.items():
                value = self._parse_int(index)
                if not 0 <= value <= 0xF:
                    raise ValueError(f"Keypad index for '{key}' out of range 0x0-0xF: {index}")
                keymap[str(key).lower()] = value

        quit_key = str(data.get("quit_key", "p")).lower()
        if quit_key in keymap:
            raise ValueError(f"quit_key '{quit_key}' is also mapped to a keypad index")

        rom_path = data.get("rom")
        return EmulatorConfig(
            rom_path=str(rom_path) if rom_path is not None else None,
            debug_enabled=self._parse_bool(data.get("debug", False), "debug"),
            cycle_interval_ms=interval,
            display_scale=scale,
            keymap=keymap,
            quit_key=quit_key
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")

    def _parse_bool(self, value: Any, name: str) -> bool:
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be true or false, got {value!r}")
        return value
