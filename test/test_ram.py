#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from tchip.ram import RAM, RAMError


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_init(self):
        self.assertEqual("", RAM().mem.hex())
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_write(self):
        self.ram.write(1, 255)
        self.assertEqual("00ff000000", self.ram.mem.hex())
        self.assertEqual(255, self.ram.read(1))

    def test_ram_write_block(self):
        self.ram.write_block(1, b"\xFD\xFE")
        self.ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.ram.mem.hex())
        self.assertEqual(b"\xFD\xFE", bytes(self.ram.read_block(1, 2)))

    def test_ram_byte_overflow(self):
        self.assertRaises(RAMError, self.ram.write, 5, 255)
        self.assertRaises(RAMError, self.ram.read, 5)
        self.assertRaises(RAMError, self.ram.read, -1)

    def test_ram_block_overflow(self):
        self.assertRaises(RAMError, self.ram.write_block, 4, b"\xFE\xFF")
        self.assertRaises(RAMError, self.ram.read_block, 4, 2)
        # Nothing is written when the block doesn't fit
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_overflow_message(self):
        with self.assertRaises(RAMError) as context:
            self.ram.read_block(3, 4)

        self.assertIn("0x0003", str(context.exception))

    def test_ram_empty_block_at_top(self):
        self.assertEqual(b"", bytes(self.ram.read_block(5, 0)))

    def test_ram_clear(self):
        self.ram.write_block(1, b"\xFD\xFE")
        self.ram.clear()
        self.assertEqual("0000000000", self.ram.mem.hex())
