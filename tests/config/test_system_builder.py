# tests/config/test_system_builder.py
"""
chip8_tracer.config.builderモジュールの単体テスト。
"""
import pytest

from chip8_tracer.config.builder import SystemBuilder
from chip8_tracer.config.models import EmulatorConfig

def test_build_with_rom(tmp_path):
    rom = tmp_path / "test.ch8"
    rom.write_bytes(bytes([0x60, 0x05, 0x70, 0x03]))
    config = EmulatorConfig(rom_path=str(rom), debug_enabled=True)

    cpu = SystemBuilder().build_system(config)
    assert cpu.debug_enabled
    assert cpu.get_state().memory.read_block(0x200, 4) == [0x60, 0x05, 0x70, 0x03]
    assert cpu.trace.entries() == ["ROM loaded into memory"]

def test_build_without_rom(caplog):
    with caplog.at_level("WARNING"):
        cpu = SystemBuilder().build_system(EmulatorConfig())
    assert not cpu.debug_enabled
    assert cpu.get_state().memory.read(0x200) == 0
    assert "No ROM configured" in caplog.text

def test_build_with_missing_rom(tmp_path):
    config = EmulatorConfig(rom_path=str(tmp_path / "missing.ch8"))
    with pytest.raises(OSError):
        SystemBuilder().build_system(config)
