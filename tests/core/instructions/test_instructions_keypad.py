import unittest

from chip8_tracer.common.errors import InvalidKeyError
from chip8_tracer.common.types import NO_KEYS_PRESSED
from chip8_tracer.core.cpu import Chip8Cpu
from chip8_tracer.core.instructions import decode_opcode, execute_instruction

def keypad_with(*keys):
    return tuple(n in keys for n in range(16))

class TestChip8KeypadInstructions(unittest.TestCase):
    def setUp(self):
        self.cpu = Chip8Cpu()
        self.state = self.cpu.get_state()

    def _execute(self, opcode, keypad=NO_KEYS_PRESSED):
        op = decode_opcode(opcode)
        execute_instruction(op, self.state, keypad)

    def test_skp(self):
        self.state.v[0] = 5
        self._execute(0xE09E, keypad_with(5))
        self.assertEqual(self.state.pc, 0x204)
        self._execute(0xE09E, keypad_with(4))
        self.assertEqual(self.state.pc, 0x206)

    def test_sknp(self):
        self.state.v[0] = 5
        self._execute(0xE0A1, keypad_with(5))
        self.assertEqual(self.state.pc, 0x202)
        self._execute(0xE0A1)
        self.assertEqual(self.state.pc, 0x206)

    def test_key_index_above_f_is_rejected(self):
        self.state.v[0] = 0x1A
        for opcode in (0xE09E, 0xE0A1):
            with self.assertRaises(InvalidKeyError) as ctx:
                self._execute(opcode, keypad_with(0xA))
            self.assertEqual(ctx.exception.key, 0x1A)
            self.assertEqual(ctx.exception.opcode, opcode)
            self.assertEqual(self.state.pc, 0x200)

    def test_highest_key_index(self):
        self.state.v[0] = 0xF
        self._execute(0xE09E, keypad_with(0xF))
        self.assertEqual(self.state.pc, 0x204)

    def test_wait_for_key_holds_pc(self):
        self.state.v[0] = 0x33
        self._execute(0xF00A)
        self.assertEqual(self.state.pc, 0x200)
        self._execute(0xF00A, keypad_with(7))
        self.assertEqual(self.state.pc, 0x202)
        # 押されたキーはVXに書き込まれない
        self.assertEqual(self.state.v[0], 0x33)

if __name__ == '__main__':
    unittest.main()
