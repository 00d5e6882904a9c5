#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

The keymap is a comma-separated list of 16 decimal key codes, one for each of
the keys 0 to F in order.  Plugins report held keys as a 16-bit mask, where
bit n is set while key n is held.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap, renderer, force_lowercase=False):
        self.keymap_dict = {}
        self.renderer = renderer
        self.keypad = 0
        keymap_split = keymap.split(",")

        if len(keymap_split) != 0x10:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, key_defined in enumerate(keymap_split):
            try:
                key_defined_ord = int(key_defined)
            except ValueError:
                raise InputsError("Defined keys are not all integer values") from None

            if force_lowercase:
                # If we are working with characters rather than keyscan codes, we should convert to lowercase
                key_defined_ord = ord(chr(key_defined_ord).lower())

            if key_defined_ord in self.keymap_dict:
                raise InputsError("Duplicate keys defined")

            self.keymap_dict[key_defined_ord] = key_num

    def _set_key(self, key_code, held):
        # Returns False if the key code isn't mapped to the keypad
        hex_key = self.keymap_dict.get(key_code)

        if hex_key is None:
            return False

        if held:
            self.keypad |= 1 << hex_key
        else:
            self.keypad &= ~(1 << hex_key)

        return True

    def process_messages(self):
        return False  # Don't exit the program

    def get_keypad(self):
        return self.keypad

    def shutdown(self):
        pass
