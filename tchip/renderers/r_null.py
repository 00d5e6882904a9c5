#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

Once per frame, the host hands the CPU's framebuffer to draw().  Only bytes
that changed since the previous frame are unpacked, and each of their pixels
is passed to set_pixel(), so plugins only ever see on/off pixels.

This module can be used on its own as a Renderer plugin for headless runs.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.last_frame = None
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height
        self.last_frame = None  # Anything drawn before is now invalid, so redraw everything next time

    def draw(self, framebuffer):
        # Returns whether anything changed on screen
        vid_width, vid_height = framebuffer.get_vid_size()

        if vid_width != self.width or vid_height != self.height:
            self.set_resolution(vid_width, vid_height)

        frame = framebuffer.get_bytes()
        last_frame = self.last_frame

        if frame == last_frame:
            self.refresh_display()
            return False

        row_bytes = vid_width // 8

        for vram_loc, byte in enumerate(frame):
            if last_frame is not None and last_frame[vram_loc] == byte:
                continue

            y, column = divmod(vram_loc, row_bytes)

            for bit in range(8):
                self.set_pixel(column * 8 + bit, y, (byte >> (7 - bit)) & 1)

        self.last_frame = frame
        self.refresh_display(True)
        return True

    def set_pixel(self, x, y, colour):  # pylint: disable=unused-argument
        pass

    def refresh_display(self, content_changed=False):
        pass

    def set_title(self, title):
        pass

    def shutdown(self):
        pass
