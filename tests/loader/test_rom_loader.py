# tests/loader/test_rom_loader.py
"""
chip8_tracer.loader.loaderモジュールの単体テスト。
"""
import pytest

from chip8_tracer.core.cpu import Chip8Cpu, MAX_ROM_SIZE
from chip8_tracer.loader.loader import RomLoader

@pytest.fixture
def loader():
    return RomLoader()

def test_load_rom(loader, tmp_path):
    rom = tmp_path / "ibm.ch8"
    rom.write_bytes(bytes([0x00, 0xE0, 0x12, 0x02]))
    cpu = Chip8Cpu()
    assert loader.load_rom(str(rom), cpu) == 4
    assert cpu.get_state().memory.read_block(0x200, 4) == [0x00, 0xE0, 0x12, 0x02]

def test_empty_rom(loader, tmp_path):
    rom = tmp_path / "empty.ch8"
    rom.write_bytes(b"")
    with pytest.raises(ValueError):
        loader.read_rom(str(rom))

def test_rom_too_large(loader, tmp_path):
    rom = tmp_path / "big.ch8"
    rom.write_bytes(bytes(MAX_ROM_SIZE + 1))
    cpu = Chip8Cpu()
    with pytest.raises(ValueError):
        loader.load_rom(str(rom), cpu)
    assert cpu.get_state().memory.read(0x200) == 0

def test_missing_rom(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.read_rom(str(tmp_path / "nope.ch8"))
