# tests/core/instructions/test_decode.py
"""
オペコードのデコード（2段ディスパッチ）の単体テスト。
"""
import pytest

from chip8_tracer.common.errors import UnknownOpcodeError
from chip8_tracer.core.instructions import decode_opcode
from chip8_tracer.core.instructions.maps import EXECUTE_MAP

# @intent:test_suite 全命令ファミリのデコード結果と表示文字列の検証。

@pytest.mark.parametrize("opcode, key, text", [
    (0x00E0, "CLS", "CLS"),
    (0x00EE, "RET", "RET"),
    (0x1234, "JP", "JP 0x234"),
    (0x2345, "CALL", "CALL 0x345"),
    (0x3A12, "SE_IMM", "SE VA, 0x12"),
    (0x4B34, "SNE_IMM", "SNE VB, 0x34"),
    (0x5120, "SE_REG", "SE V1, V2"),
    (0x6005, "LD_IMM", "LD V0, 0x05"),
    (0x7003, "ADD_IMM", "ADD V0, 0x03"),
    (0x8120, "LD_REG", "LD V1, V2"),
    (0x8121, "OR", "OR V1, V2"),
    (0x8122, "AND", "AND V1, V2"),
    (0x8123, "XOR", "XOR V1, V2"),
    (0x8124, "ADD_REG", "ADD V1, V2"),
    (0x8125, "SUB", "SUB V1, V2"),
    (0x8126, "SHR", "SHR V1"),
    (0x8127, "SUBN", "SUBN V1, V2"),
    (0x812E, "SHL", "SHL V1"),
    (0x9120, "SNE_REG", "SNE V1, V2"),
    (0xA2F0, "LD_I", "LD I, 0x2F0"),
    (0xB300, "JP_V0", "JP V0, 0x300"),
    (0xC1FF, "RND", "RND V1, 0xFF"),
    (0xD125, "DRW", "DRW V1, V2, 5"),
    (0xE19E, "SKP", "SKP V1"),
    (0xE1A1, "SKNP", "SKNP V1"),
    (0xF107, "LD_VX_DT", "LD V1, DT"),
    (0xF10A, "LD_VX_K", "LD V1, K"),
    (0xF115, "LD_DT_VX", "LD DT, V1"),
    (0xF118, "LD_ST_VX", "LD ST, V1"),
    (0xF11E, "ADD_I", "ADD I, V1"),
    (0xF129, "LD_F", "LD F, V1"),
    (0xF133, "LD_B", "LD B, V1"),
    (0xF155, "LD_DUMP", "LD [I], V1"),
    (0xF165, "LD_LOAD", "LD V1, [I]"),
])
def test_decode_known_opcodes(opcode, key, text):
    instruction = decode_opcode(opcode)
    assert instruction.key == key
    assert instruction.opcode == opcode
    assert str(instruction) == text
    assert key in EXECUTE_MAP

# @intent:test_case_unknown 未定義のオペコードがUnknownOpcodeErrorになることを検証します。
@pytest.mark.parametrize("opcode", [0x0000, 0x0123, 0x00E1, 0x8008, 0x800F, 0xE000, 0xE19F, 0xF000, 0xF0FF])
def test_decode_unknown_opcodes(opcode):
    with pytest.raises(UnknownOpcodeError) as exc_info:
        decode_opcode(opcode)
    assert exc_info.value.opcode == opcode

def test_low_nibble_of_register_compare_is_ignored():
    assert decode_opcode(0x5121).key == "SE_REG"
    assert decode_opcode(0x912F).key == "SNE_REG"

def test_operand_fields():
    instruction = decode_opcode(0xD12F)
    assert (instruction.x, instruction.y, instruction.n) == (1, 2, 0xF)
    assert instruction.nn == 0x2F
    assert instruction.nnn == 0x12F
    assert instruction.family == 0xD
