#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from tchip.constants import DEFAULT_KEYMAP
from tchip.inputs.i_null import Inputs, InputsError
from tchip.renderers.r_null import Renderer


class TestInputs(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer()

    def test_inputs_default_keymap(self):
        inputs = Inputs(DEFAULT_KEYMAP, self.renderer)
        self.assertEqual(16, len(inputs.keymap_dict))
        self.assertEqual(0x0, inputs.keymap_dict[ord("x")])
        self.assertEqual(0x1, inputs.keymap_dict[ord("1")])
        self.assertEqual(0xC, inputs.keymap_dict[ord("4")])
        self.assertEqual(0xF, inputs.keymap_dict[ord("v")])

    def test_inputs_lowercase(self):
        keymap = ",".join(str(ord(c)) for c in "X123QWEASDZC4RFV")
        inputs = Inputs(keymap, self.renderer, force_lowercase=True)
        self.assertEqual(0x0, inputs.keymap_dict[ord("x")])
        self.assertEqual(0x4, inputs.keymap_dict[ord("q")])

    def test_inputs_null_behaviour(self):
        inputs = Inputs(DEFAULT_KEYMAP, self.renderer)
        self.assertFalse(inputs.process_messages())
        self.assertEqual(0, inputs.get_keypad())
        inputs.shutdown()

    def test_inputs_bad_keymaps(self):
        for keymap in "1,2,3", ",".join(["a"] * 16), ",".join(["5"] * 16):
            self.assertRaises(InputsError, Inputs, keymap, self.renderer)

    def test_inputs_set_key(self):
        inputs = Inputs(DEFAULT_KEYMAP, self.renderer)
        self.assertTrue(inputs._set_key(ord("x"), True))
        self.assertTrue(inputs._set_key(ord("v"), True))
        self.assertEqual(0x8001, inputs.get_keypad())
        self.assertTrue(inputs._set_key(ord("x"), False))
        self.assertEqual(0x8000, inputs.get_keypad())
        self.assertFalse(inputs._set_key(ord("p"), True))
        self.assertEqual(0x8000, inputs.get_keypad())
