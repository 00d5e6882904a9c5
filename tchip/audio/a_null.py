#!/usr/bin/env python3

"""
Null Audio Plugin

Serves as a base class for other Audio plugins.  Can be used on its own if no
sound is required.

The host polls the sound timer once per frame and calls enable_buzzer() with
whether it is above zero.  Plugins only need to act when that changes.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"


class Audio:
    def __init__(self):
        # Buzzer should be disabled (not playing sounds) by default
        self.buzzer_enabled = False

    def enable_buzzer(self, enabled):
        # Returns True if the buzzer state changed
        if enabled == self.buzzer_enabled:
            return False

        self.buzzer_enabled = enabled
        return True

    def shutdown(self):
        pass
