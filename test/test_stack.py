#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from tchip.stack import Stack, StackError


class TestStack(unittest.TestCase):
    def setUp(self):
        self.stack = Stack(3)

    def _populate_stack(self):
        for address in 0x202, 0x204, 0xFFE:
            self.stack.push(address)

    def test_stack_push_pop(self):
        self._populate_stack()
        self.assertEqual(3, len(self.stack))
        self.assertEqual([0x202, 0x204, 0xFFE], self.stack.get_items())
        self.assertEqual(0xFFE, self.stack.pop())
        self.assertEqual(0x204, self.stack.pop())
        self.assertEqual(0x202, self.stack.pop())
        self.assertEqual(0, len(self.stack))

    def test_stack_items_are_a_copy(self):
        self._populate_stack()
        self.stack.get_items().clear()
        self.assertEqual(3, len(self.stack))

    def test_stack_overflow(self):
        self._populate_stack()
        self.assertRaises(StackError, self.stack.push, 0x206)
        self.assertEqual(3, len(self.stack))

    def test_stack_underflow(self):
        with self.assertRaises(StackError) as context:
            self.stack.pop()

        self.assertIn("underflow", str(context.exception))
