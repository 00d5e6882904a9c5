#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "TickChip Interpreter"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2026 TickChip Developers, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEMORY_SIZE = 0x1000    # 4KB address space
PROGRAM_START = 0x200   # Everything below here is reserved for the interpreter
FONT_START = 0x000
FONT_GLYPH_SIZE = 5     # Bytes per hex digit glyph
NUM_REGISTERS = 0x10
STACK_DEPTH = 16

# Built-in 4x5 hex digit glyphs, 0 to F
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))

# Display
VID_WIDTH = 64
VID_HEIGHT = 32

# Timing.  One frame is worth this many time units of guest execution, which is roughly 1/60 of a second on the
# original hardware.  The host converts frames to wall time.
FRAME_BUDGET = 16666
FRAME_FREQ = 60.0
FRAME_INTERVAL = 1.0 / FRAME_FREQ

# Default mappings for keys 0-F.  These are PyGame keyscans, and also the ASCII codes of the same characters on a
# QWERTY keyboard:  X 1 2 3 Q W E A S D Z C 4 R F V
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Startup
SUPPORTED_RENDERERS = ["pygame", "curses", "null"]
