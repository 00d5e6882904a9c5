#!/usr/bin/env python3

"""
Crash Reports

When emulation halts with an error, the CPU state at the time is attached to
the error message so the faulty ROM can be diagnosed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Address of the last instruction fetched
    * OP - Last opcode fetched, and its mnemonic if it decoded
    * Stack - Stack contents
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

from .decoder import MNEMONICS, GROUP_MASKS


class Debugger:
    def mnemonic(self, opcode):
        key = opcode & GROUP_MASKS.get(opcode >> 12, 0xF000)
        return MNEMONICS.get(key, "???")

    def debug(self, cpu):
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[cpu.v[reg_num] for reg_num in range(15, -1, -1)] +
            [cpu.i, cpu.dt, cpu.st, cpu.debug_pc, cpu.opcode, self.mnemonic(cpu.opcode)]
        )

        stack_items = cpu.stack.get_items()
        stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
        debug_str += "\nStack:{}".format(stack_str or " (Empty)")
        return debug_str
