#!/usr/bin/env python3

"""
Curses Audio Plugin

Allows beeps to be played in the Terminal window (no sampled sound)!

A beep occurs whenever the buzzer switches on.  Beeps cannot be stopped or
held, since they are effectively just a CTRL+G (character 7 - BEL).
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import curses
from .a_null import Audio as AudioBase


class Audio(AudioBase):
    def enable_buzzer(self, enabled):
        changed = super().enable_buzzer(enabled)

        if changed and enabled:
            curses.beep()

        return changed
