#!/usr/bin/env python3

"""
Host I/O Functionality

Reads ROM binaries from disk.  ROMs have no header, so the whole file is
handed to the CPU as-is.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()
