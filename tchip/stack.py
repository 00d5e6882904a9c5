#!/usr/bin/env python3

"""
Stack Emulator

The call stack lives outside of guest memory.  There is no stack pointer
register visible to the running program, so a plain list of return addresses
is all that is needed.  CALL pushes and RET pops; nothing else touches it.

An unbalanced RET is a bug in the ROM, and is reported as an underflow.  A
call chain deeper than the hardware allowed is reported as an overflow.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class Stack:
    def __init__(self, depth):
        self.depth = depth
        self.addresses = []

    def __len__(self):
        return len(self.addresses)

    def push(self, address):
        if len(self.addresses) == self.depth:
            raise StackError("Stack overflow: more than {} nested calls".format(self.depth))

        self.addresses.append(address)

    def pop(self):
        if not self.addresses:
            raise StackError("Stack underflow: return without a matching call")

        return self.addresses.pop()

    def get_items(self):
        # Oldest first, for crash reports
        return list(self.addresses)
