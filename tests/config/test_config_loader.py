# tests/config/test_config_loader.py
"""
chip8_tracer.config.loaderモジュールの単体テスト。
"""
import pytest

from chip8_tracer.config.loader import ConfigLoader
from chip8_tracer.config.models import DEFAULT_KEYMAP, EmulatorConfig

# @intent:test_suite YAML設定ファイルの解析と検証の確認。

@pytest.fixture
def loader():
    return ConfigLoader()

def write_yaml(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)

def test_full_config(loader, tmp_path):
    path = write_yaml(tmp_path, """
rom: roms/pong.ch8
debug: true
cycle_interval_ms: 2
display_scale: 8
quit_key: Escape
keymap:
  "1": 0x1
  Q: "0x4"
  w: 5
""")
    config = loader.load_from_file(path)
    assert config.rom_path == "roms/pong.ch8"
    assert config.debug_enabled is True
    assert config.cycle_interval_ms == 2
    assert config.display_scale == 8
    assert config.quit_key == "escape"
    assert config.keymap == {"1": 1, "q": 4, "w": 5}

def test_empty_file_uses_defaults(loader, tmp_path):
    config = loader.load_from_file(write_yaml(tmp_path, ""))
    assert config == EmulatorConfig()
    assert config.keymap == DEFAULT_KEYMAP

@pytest.mark.parametrize("text", [
    "- just\n- a list\n",
    "cycle_interval_ms: 0\n",
    "display_scale: -1\n",
    "cycle_interval_ms: true\n",
    "keymap:\n  a: 16\n",
    "keymap:\n  a: 1\nquit_key: a\n",
    "display_scale: [1]\n",
])
def test_invalid_config(loader, tmp_path, text):
    with pytest.raises(ValueError):
        loader.load_from_file(write_yaml(tmp_path, text))

def test_missing_file(loader, tmp_path):
    with pytest.raises(OSError):
        loader.load_from_file(str(tmp_path / "missing.yaml"))

@pytest.mark.parametrize("text", ['debug: "false"\n', "debug: 1\n", "debug: yes please\n"])
def test_debug_must_be_boolean(loader, tmp_path, text):
    with pytest.raises(ValueError):
        loader.load_from_file(write_yaml(tmp_path, text))

def test_debug_false(loader, tmp_path):
    config = loader.load_from_file(write_yaml(tmp_path, "debug: false\n"))
    assert config.debug_enabled is False
