#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws the framebuffer in a standard Linux-style TTY Terminal, the Windows
Command Prompt, or PowerShell.  Each lit pixel is an inverted space, stretched
horizontally by the scale factor so the picture keeps roughly the right shape.

The top line of the pad is kept for the title bar.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import curses
import _curses
from .r_null import Renderer as RendererBase


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = 2  # Default horizontal stretch if not supplied, or set to default

        self.pixel_char = " " * scale
        self.pad = None
        self.title = ""
        self.refresh_needed = False
        self.last_screen_height = -1
        self.last_screen_width = -1
        self.screen = curses.initscr()
        curses.curs_set(0)
        curses.noecho()
        curses.cbreak()
        super().__init__(scale)

    def set_resolution(self, width, height):
        # We have to allow one extra character, presumably for the cursor, otherwise we can't write the furthest
        # bottom-right pixel.  The extra row on top holds the title.
        self.pad = curses.newpad(height + 2, width * self.scale + 1)
        super().set_resolution(width, height)
        self._draw_title()

    def set_pixel(self, x, y, colour):
        self.pad.addstr(y + 1, x * self.scale, self.pixel_char, curses.A_REVERSE if colour else curses.A_NORMAL)

    def refresh_display(self, content_changed=False):
        screen_height, screen_width = self.screen.getmaxyx()

        if screen_height != self.last_screen_height or screen_width != self.last_screen_width:
            # Terminal resized, redraw everything
            self.screen.clear()

            if hasattr(curses, "resizeterm"):
                # This doesn't work on Windows
                curses.resizeterm(screen_height, screen_width)

            self.screen.refresh()
            self.last_screen_height = screen_height
            self.last_screen_width = screen_width
            self.refresh_needed = True

        if (content_changed or self.refresh_needed) and self.pad:
            self.pad.refresh(0, 0, 0, 0, screen_height - 1, screen_width - 1)
            self.refresh_needed = False

    def set_title(self, title):
        self.title = title
        self._draw_title()

    def _draw_title(self):
        if self.pad is None:
            return

        pad_width = self.width * self.scale

        if pad_width > len(self.title):
            self.pad.addstr(0, 0, self.title.ljust(pad_width), curses.A_REVERSE)
            self.refresh_needed = True

    def shutdown(self):
        curses.nocbreak()
        curses.echo()

        try:
            curses.curs_set(1)
        except _curses.error:
            pass

        curses.endwin()
        super().shutdown()

    # No Superclass for this Curses-specific method

    def get_curses_screen(self):
        return self.screen
