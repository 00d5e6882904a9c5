#!/usr/bin/env python3

"""
PyGame Input Plugin

PyGame reports real key 'press' and 'release' events, so the keypad mask is
simply kept in step with them.  The host drains the event queue once per
frame, which is often enough for a 60Hz guest.

Closing the window or pressing ESC quits.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase


class Inputs(InputsBase):
    def process_messages(self):
        quit_program = False

        # Keep draining after a quit request, so the queue doesn't back up during shutdown
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_program = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    quit_program = True
                else:
                    self._set_key(event.key, True)
            elif event.type == pygame.KEYUP:
                self._set_key(event.key, False)

        return quit_program

    def get_keypad(self):
        # Focus loss swallows KEYUP events, so release everything rather than leave keys stuck down
        if not pygame.key.get_focused():
            self.keypad = 0

        return self.keypad
