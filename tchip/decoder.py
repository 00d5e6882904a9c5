#!/usr/bin/env python3

"""
Instruction Decoder

Every instruction is two bytes, big-endian.  The leading nibble picks a group.
Most groups hold a single instruction, but a few need a second look at the
rest of the opcode:

    Group 0x0       : the second byte picks the operation (E0, EE)
    Group 0x8       : the last nibble picks the ALU operation
    Group 0xE / 0xF : the last byte picks the operation

Masking the opcode with its group's mask gives a key, and that key either
names a known instruction or the opcode is invalid.  Operand fields sit in the
same place in every instruction, so they are all extracted up front:

    x   = low nibble of the first byte
    y   = high nibble of the second byte
    n   = low nibble of the second byte
    nn  = the second byte
    nnn = the low 12 bits
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple


class InvalidOpcode(Exception):
    pass


Instruction = namedtuple("Instruction", ["key", "opcode", "x", "y", "n", "nn", "nnn"])

# Groups not listed here are keyed on their leading nibble alone
GROUP_MASKS = {
    0x0: 0xF0FF,  # Low nibble of the leading byte is ignored, so 01E0 is still CLS
    0x8: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

MNEMONICS = {
    0x00E0: "CLS",
    0x00EE: "RET",
    0x1000: "JP addr",
    0x2000: "CALL addr",
    0x3000: "SE Vx, byte",
    0x4000: "SNE Vx, byte",
    0x5000: "SE Vx, Vy",
    0x6000: "LD Vx, byte",
    0x7000: "ADD Vx, byte",
    0x8000: "LD Vx, Vy",
    0x8001: "OR Vx, Vy",
    0x8002: "AND Vx, Vy",
    0x8003: "XOR Vx, Vy",
    0x8004: "ADD Vx, Vy",
    0x8005: "SUB Vx, Vy",
    0x8006: "SHR Vx",
    0x8007: "SUBN Vx, Vy",
    0x800E: "SHL Vx",
    0x9000: "SNE Vx, Vy",
    0xA000: "LD I, addr",
    0xB000: "JP V0, addr",
    0xC000: "RND Vx, byte",
    0xD000: "DRW Vx, Vy, nibble",
    0xE09E: "SKP Vx",
    0xE0A1: "SKNP Vx",
    0xF007: "LD Vx, DT",
    0xF00A: "LD Vx, K",
    0xF015: "LD DT, Vx",
    0xF018: "LD ST, Vx",
    0xF01E: "ADD I, Vx",
    0xF029: "LD F, Vx",
    0xF033: "LD B, Vx",
    0xF055: "LD [I], Vx",
    0xF065: "LD Vx, [I]"
}


def format_nibbles(op0, op1):
    return "{:01x}{:01x}{:01x}{:01x}".format(op0 >> 4, op0 & 0xF, op1 >> 4, op1 & 0xF)


def decode(op0, op1):
    opcode = (op0 << 8) | op1
    group = op0 >> 4
    key = opcode & GROUP_MASKS.get(group, 0xF000)

    if key not in MNEMONICS:
        raise InvalidOpcode("Invalid opcode {}".format(format_nibbles(op0, op1)))

    return Instruction(
        key=key,
        opcode=opcode,
        x=op0 & 0xF,
        y=op1 >> 4,
        n=op1 & 0xF,
        nn=op1,
        nnn=((op0 & 0xF) << 8) | op1
    )
