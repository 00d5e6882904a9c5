#!/usr/bin/env python3

"""
Framebuffer Emulator

The display is a 64x32 monochrome bitmap, packed 8 pixels to a byte in
row-major order.  The most significant bit of each byte is the leftmost pixel.

Programs cannot write into video memory directly.  Sprites are XORed onto
whatever is already there, so drawing the same sprite twice in the same place
erases it again.  Both axes wrap around: a sprite hanging off the right or
bottom edge reappears on the left or top.

A collision is reported whenever a pixel that was set gets cleared by a draw.

Nothing here talks to the host.  Renderers read the packed bytes once per
frame, whenever they like.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT
from .ram import RAM


class FramebufferError(Exception):
    pass


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        if vid_width % 8:
            raise FramebufferError("Display width must be a whole number of bytes")

        self.vid_width = vid_width
        self.vid_height = vid_height
        self.row_bytes = vid_width // 8
        self.vram = RAM(self.row_bytes * vid_height)

    def clear(self):
        self.vram.clear()

    def xor_byte(self, column, y, bits):
        # XOR 8 pixels into the byte at (column, y), returning True if any lit pixel was switched off
        vram_loc = y * self.row_bytes + column
        old_bits = self.vram.read(vram_loc)
        self.vram.write(vram_loc, old_bits ^ bits)
        return (old_bits & bits) != 0

    def draw_sprite(self, x, y, sprite):
        # Sprite x positions are not byte-aligned, so each sprite row may straddle two bytes of video memory
        x %= self.vid_width
        shift = x % 8
        left_column = x // 8
        right_column = (left_column + 1) % self.row_bytes
        collision = False

        for row, bits in enumerate(sprite):
            scr_y = (y + row) % self.vid_height

            if self.xor_byte(left_column, scr_y, bits >> shift):
                collision = True

            if shift and self.xor_byte(right_column, scr_y, (bits << (8 - shift)) & 0xFF):
                collision = True

        return collision

    def get_pixel(self, x, y):
        return (self.vram.read(y * self.row_bytes + x // 8) >> (7 - x % 8)) & 1

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def get_bytes(self):
        # Packed contents, for renderers and tests
        return bytes(self.vram.mem)
