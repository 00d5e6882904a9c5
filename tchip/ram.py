#!/usr/bin/env python3

"""
RAM Emulator

A flat, fixed-size block of bytes.  The interpreter's 4KB address space and the
packed framebuffer are both held in one of these.

Every access is bounds-checked.  A guest program that walks the index register
off the end of memory is misbehaving, and that should stop emulation rather
than quietly wrap around or read garbage.

Blocks are handed out as memoryview slices, so callers must copy them (with
bytes()) if they need the contents to outlive later writes.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"


class RAMError(Exception):
    pass


class RAM:
    def __init__(self, mem_size=0):
        self.mem_size = mem_size
        self.mem = memoryview(bytearray(mem_size))

    def _check_range(self, location, size):
        if location < 0 or location + size > self.mem_size:
            raise RAMError(
                "Memory overflow at 0x{:04x}: {} byte(s) requested, {} available".format(
                    location, size, self.mem_size
                )
            )

    def read(self, location):
        self._check_range(location, 1)
        return self.mem[location]

    def read_block(self, location, size):
        self._check_range(location, size)
        return self.mem[location:location + size]

    def write(self, location, byte):
        self._check_range(location, 1)
        self.mem[location] = byte

    def write_block(self, location, block):
        size = len(block)
        self._check_range(location, size)
        self.mem[location:location + size] = block

    def clear(self):
        self.mem[:] = bytes(self.mem_size)
