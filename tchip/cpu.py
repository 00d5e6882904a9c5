#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Like a real computer, this is where most of the processing happens.

Execution is paced in frames rather than in wall time.  Each frame is given a
fixed budget of time units, and every instruction spends some of it according
to how long it took on the original interpreter.  Instructions keep running
until the budget is gone, then control goes back to the host, which draws the
screen and waits for the next 60Hz tick.  Sprite drawing is so slow that one
draw always ends the frame, which is where the characteristic flicker and game
speed of the original come from.

The CPU owns no clocks, windows or keyboards.  The host writes the keypad mask
before each frame, and reads the framebuffer and sound timer afterwards.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import (
    MEMORY_SIZE, PROGRAM_START, FONT_START, FONT_GLYPH_SIZE, SYSTEM_FONT, NUM_REGISTERS, STACK_DEPTH, FRAME_BUDGET
)
from .decoder import decode
from .framebuffer import Framebuffer
from .ram import RAM
from .stack import Stack

# Time units spent per instruction on the original interpreter
COST_CLS = 109
COST_JUMP = 105  # JP, CALL, RET, JP V0
COST_SKIP_BYTE = (64, 46)  # (taken, not taken)
COST_SKIP_REG = (82, 64)
COST_SKIP_KEY = (64, 82)
COST_LD_BYTE = 27
COST_ADD_BYTE = 45
COST_ALU = 200
COST_LD_I = 55
COST_RND = 164
COST_DRW = 22734
COST_TIMER = 45
COST_KEY = 200
COST_ADD_I = 86
COST_LD_F = 91
COST_BCD = 364
COST_BCD_DIGIT = 73
COST_REG_BLOCK = 64


class CPUError(Exception):
    pass


class CapacityError(CPUError):
    pass


class OutOfBounds(CPUError):
    pass


class CPU:
    def __init__(self, rng=None):
        # Anything with randint(a, b) will do.  Pass a seeded Random for repeatable runs.
        self.rng = Random() if rng is None else rng
        self.ram = RAM(MEMORY_SIZE)
        self.ram.write_block(FONT_START, SYSTEM_FONT)
        self.stack = Stack(STACK_DEPTH)
        self.framebuffer = Framebuffer()

        # Map masked opcodes to their handlers.
        # x/y = register (0-15)
        # n = nibble
        # nn = byte
        # nnn = address
        self.instructions = {
            0x00E0: self._00E0,
            0x00EE: self._00EE,
            0x1000: self._1nnn,
            0x2000: self._2nnn,
            0x3000: self._3xnn,
            0x4000: self._4xnn,
            0x5000: self._5xy0,
            0x6000: self._6xnn,
            0x7000: self._7xnn,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            0x9000: self._9xy0,
            0xA000: self._Annn,
            0xB000: self._Bnnn,
            0xC000: self._Cxnn,
            0xD000: self._Dxyn,
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Values written here must already fit in a byte
        self.i = 0  # Index register

        # Initialise timers
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer.  The host plays a tone while this is above zero

        # Initialise program counter, plus the last fetch for crash reports
        self.pc = PROGRAM_START
        self.debug_pc = PROGRAM_START
        self.opcode = 0

        # Input-related vars.  Bit n is set while key n is held
        self.keypad = 0

    def load_program(self, data):
        capacity = MEMORY_SIZE - PROGRAM_START

        if len(data) > capacity:
            raise CapacityError(
                "ROM is {} bytes, but only {} bytes are available for programs".format(len(data), capacity)
            )

        self.ram.write_block(PROGRAM_START, data)

    def frame(self):
        # Timers tick once per frame, before any instructions run
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

        remaining = FRAME_BUDGET

        while remaining > 0:
            remaining -= self.step()

    def step(self):
        # Fetch, decode and execute one instruction, returning the time it took
        pc = self.pc

        if pc >= MEMORY_SIZE - 1:
            raise OutOfBounds("Program counter 0x{:04x} is outside of memory".format(pc))

        self.debug_pc = pc
        op0, op1 = self.ram.read_block(pc, 2)
        self.opcode = (op0 << 8) | op1
        self.pc = pc + 2  # Program counter moves on before the instruction executes
        return self.execute(op0, op1)

    def execute(self, op0, op1):
        instruction = decode(op0, op1)
        return self.instructions[instruction.key](instruction)

    def _skip(self, condition, costs):
        if condition:
            self.pc += 2
            return costs[0]

        return costs[1]

    def _is_key_down(self, key):
        return (self.keypad >> key) & 1 == 1

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()
        return COST_CLS

    def _00EE(self, ins):  # RET
        self.pc = self.stack.pop()
        return COST_JUMP

    def _1nnn(self, ins):  # JP addr
        self.pc = ins.nnn
        return COST_JUMP

    def _2nnn(self, ins):  # CALL addr
        self.stack.push(self.pc)
        self.pc = ins.nnn
        return COST_JUMP

    def _3xnn(self, ins):  # SE Vx, byte
        return self._skip(self.v[ins.x] == ins.nn, COST_SKIP_BYTE)

    def _4xnn(self, ins):  # SNE Vx, byte
        return self._skip(self.v[ins.x] != ins.nn, COST_SKIP_BYTE)

    def _5xy0(self, ins):  # SE Vx, Vy
        return self._skip(self.v[ins.x] == self.v[ins.y], COST_SKIP_REG)

    def _6xnn(self, ins):  # LD Vx, byte
        self.v[ins.x] = ins.nn
        return COST_LD_BYTE

    def _7xnn(self, ins):  # ADD Vx, byte
        # No carry flag for immediate adds
        self.v[ins.x] = (self.v[ins.x] + ins.nn) & 0xFF
        return COST_ADD_BYTE

    def _8xy0(self, ins):  # LD Vx, Vy
        self.v[ins.x] = self.v[ins.y]
        return COST_ALU

    def _8xy1(self, ins):  # OR Vx, Vy
        self.v[ins.x] |= self.v[ins.y]
        return COST_ALU

    def _8xy2(self, ins):  # AND Vx, Vy
        self.v[ins.x] &= self.v[ins.y]
        return COST_ALU

    def _8xy3(self, ins):  # XOR Vx, Vy
        self.v[ins.x] ^= self.v[ins.y]
        return COST_ALU

    # Vf must be written after Vx in all of these, so the flag wins when Vf is itself the target

    def _8xy4(self, ins):  # ADD Vx, Vy
        val = self.v[ins.x] + self.v[ins.y]
        self.v[ins.x] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying
        return COST_ALU

    def _post_8xy5_8xy7(self, x, val):
        self.v[x] = val & 0xFF
        self.v[0xF] = int(val >= 0)  # Vf is set when NOT borrowing
        return COST_ALU

    def _8xy5(self, ins):  # SUB Vx, Vy
        return self._post_8xy5_8xy7(ins.x, self.v[ins.x] - self.v[ins.y])

    def _8xy6(self, ins):  # SHR Vx
        val = self.v[ins.x]
        self.v[ins.x] = val >> 1
        self.v[0xF] = val & 1
        return COST_ALU

    def _8xy7(self, ins):  # SUBN Vx, Vy
        return self._post_8xy5_8xy7(ins.x, self.v[ins.y] - self.v[ins.x])

    def _8xyE(self, ins):  # SHL Vx
        val = self.v[ins.x]
        self.v[ins.x] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7
        return COST_ALU

    def _9xy0(self, ins):  # SNE Vx, Vy
        return self._skip(self.v[ins.x] != self.v[ins.y], COST_SKIP_REG)

    def _Annn(self, ins):  # LD I, addr
        self.i = ins.nnn
        return COST_LD_I

    def _Bnnn(self, ins):  # JP V0, addr
        # Can land past the end of memory.  The next fetch will catch it.
        self.pc = ins.nnn + self.v[0x0]
        return COST_JUMP

    def _Cxnn(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[ins.x] = self.rng.randint(0, 0xFF) & ins.nn
        return COST_RND

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        sprite = self.ram.read_block(self.i, ins.n)
        collision = self.framebuffer.draw_sprite(self.v[ins.x], self.v[ins.y], sprite)
        self.v[0xF] = int(collision)
        return COST_DRW

    def _Ex9E(self, ins):  # SKP Vx
        return self._skip(self._is_key_down(self.v[ins.x]), COST_SKIP_KEY)

    def _ExA1(self, ins):  # SKNP Vx
        return self._skip(not self._is_key_down(self.v[ins.x]), COST_SKIP_KEY)

    def _Fx07(self, ins):  # LD Vx, DT
        self.v[ins.x] = self.dt
        return COST_TIMER

    def _Fx0A(self, ins):  # LD Vx, K
        for key in range(0x10):
            if self._is_key_down(key):
                self.v[ins.x] = key
                return COST_KEY

        # Nothing held.  Come back to this instruction, and give up the rest of the frame so the host can poll
        # the keyboard again.
        self.pc -= 2
        return FRAME_BUDGET

    def _Fx15(self, ins):  # LD DT, Vx
        self.dt = self.v[ins.x]
        return COST_TIMER

    def _Fx18(self, ins):  # LD ST, Vx
        self.st = self.v[ins.x]
        return COST_TIMER

    def _Fx1E(self, ins):  # ADD I, Vx
        self.i = (self.i + self.v[ins.x]) & 0xFFFF
        return COST_ADD_I

    def _Fx29(self, ins):  # LD F, Vx
        self.i = FONT_START + FONT_GLYPH_SIZE * self.v[ins.x]
        return COST_LD_F

    def _Fx33(self, ins):  # LD B, Vx
        val = self.v[ins.x]
        digits = (val // 100, (val // 10) % 10, val % 10)  # Most-significant digit first
        self.ram.write_block(self.i, bytes(digits))
        return COST_BCD + COST_BCD_DIGIT * sum(digits)

    def _Fx55(self, ins):  # LD [I], Vx
        # Inclusive of Vx.  I is left alone.
        self.ram.write_block(self.i, self.v[:ins.x + 1])
        return COST_REG_BLOCK * (ins.x + 2)

    def _Fx65(self, ins):  # LD Vx, [I]
        self.v[:ins.x + 1] = self.ram.read_block(self.i, ins.x + 1)
        return COST_REG_BLOCK * (ins.x + 2)
