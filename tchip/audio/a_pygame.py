#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays a continuous square wave tone through PyGame / SDL while the buzzer is
enabled.  The waveform is a single cycle, looped for as long as the sound
timer is running.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100
TONE_FREQUENCY = 440.0
DEFAULT_VOLUME = 0.25


class Audio(AudioBase):
    def __init__(self):
        # Unsigned 8-bit mono, so a square wave is simply a run of 0xFF followed by a run of 0x00
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, allowedchanges=0)
        pygame.mixer.init()
        half_cycle = int(PLAYBACK_FREQUENCY / TONE_FREQUENCY / 2)
        self.sound = pygame.mixer.Sound(buffer=b"\xFF" * half_cycle + b"\x00" * half_cycle)
        self.sound.set_volume(DEFAULT_VOLUME)
        super().__init__()

    def enable_buzzer(self, enabled):
        # If the tone is already playing, it won't be restarted
        changed = super().enable_buzzer(enabled)

        if changed:
            if enabled:
                self.sound.play(-1)
            else:
                self.sound.stop()

        return changed

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()
