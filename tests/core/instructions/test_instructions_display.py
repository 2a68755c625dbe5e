import unittest

from chip8_tracer.common.errors import AddressOutOfRangeError
from chip8_tracer.common.types import NO_KEYS_PRESSED
from chip8_tracer.core.cpu import Chip8Cpu
from chip8_tracer.core.instructions import decode_opcode, execute_instruction

class TestChip8DisplayInstructions(unittest.TestCase):
    def setUp(self):
        self.cpu = Chip8Cpu()
        self.state = self.cpu.get_state()

    def _execute(self, opcode):
        op = decode_opcode(opcode)
        execute_instruction(op, self.state, NO_KEYS_PRESSED)

    def _draw_zero_glyph_at(self, x, y):
        self.state.i = 0 # "0" glyph: F0 90 90 90 F0
        self.state.v[0] = x
        self.state.v[1] = y
        self._execute(0xD015)

    def test_draw_glyph(self):
        self._draw_zero_glyph_at(10, 5)
        self.assertEqual(self.state.vf, 0)
        for col in range(4):
            self.assertTrue(self.state.pixel(10 + col, 5))
            self.assertTrue(self.state.pixel(10 + col, 9))
        self.assertTrue(self.state.pixel(10, 6))
        self.assertFalse(self.state.pixel(11, 6))
        self.assertTrue(self.state.pixel(13, 6))
        self.assertEqual(sum(self.state.framebuffer), 14)

    def test_draw_twice_restores_and_reports_collision(self):
        self._draw_zero_glyph_at(3, 3)
        self._draw_zero_glyph_at(3, 3)
        self.assertEqual(self.state.vf, 1)
        self.assertFalse(any(self.state.framebuffer))

    def test_clear_then_draw_matches_fresh_draw(self):
        fresh = Chip8Cpu().get_state()
        execute_instruction(decode_opcode(0xD015), fresh, NO_KEYS_PRESSED)

        self._draw_zero_glyph_at(20, 20)
        self._execute(0x00E0)
        self.assertFalse(any(self.state.framebuffer))
        self._draw_zero_glyph_at(0, 0)
        self.assertEqual(self.state.framebuffer, fresh.framebuffer)

    def test_draw_wraps_across_rows(self):
        # x=62: セル62, 63, 64, 65 (64以降は次の行の先頭)
        self._draw_zero_glyph_at(62, 0)
        fb = self.state.framebuffer
        self.assertTrue(fb[62])
        self.assertTrue(fb[63])
        self.assertTrue(fb[64])
        self.assertTrue(fb[65])

    def test_draw_wraps_past_last_cell(self):
        self._draw_zero_glyph_at(0, 31)
        fb = self.state.framebuffer
        self.assertTrue(fb[31 * 64])
        # y=32 -> セル 2048 -> 0
        self.assertTrue(fb[0])
        self.assertTrue(fb[3 * 64])

    def test_zero_height_sprite(self):
        self.state.vf = 1
        self._execute(0xD010)
        self.assertEqual(self.state.vf, 0)
        self.assertFalse(any(self.state.framebuffer))

    def test_sprite_read_out_of_range_draws_nothing(self):
        self.state.i = 0xFFD
        self.state.vf = 1
        with self.assertRaises(AddressOutOfRangeError):
            self._execute(0xD015)
        self.assertFalse(any(self.state.framebuffer))
        self.assertEqual(self.state.vf, 1)
        self.assertEqual(self.state.pc, 0x200)

if __name__ == '__main__':
    unittest.main()
