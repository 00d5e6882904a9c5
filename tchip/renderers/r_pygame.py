#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the framebuffer onto an SDL window surface via PyGame.  Pixels are
written into an RGB buffer at the emulated resolution, and the buffer is then
stretched (using 'Nearest Neighbour' scaling, so pixels stay square and sharp)
to fill the window.  This means we don't have to draw the same pixel multiple
times.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME

DEFAULT_PALETTE = "000000,FFFFFF"  # Unlit, lit


class Renderer(RendererBase):
    def __init__(self, scale=None, palette=None, **kwargs):
        if scale is None:
            scale = 1024  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.set_title(APP_NAME)
        self.rgb_buffer = None
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)

        palette_split = (DEFAULT_PALETTE if palette is None else palette).split(",")

        if len(palette_split) != 2:
            raise RendererError("Exactly 2 palette colours are required (unlit and lit).")

        colour_map = []

        for colour in palette_split:
            if len(colour) != 6:
                raise RendererError("Palette colours must all be 6 hex digits long.")

            try:
                colour_map.append(int(colour, 16))
            except ValueError:
                raise RendererError("Invalid palette colour defined.") from None

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = [bytes((i >> 16, (i >> 8) & 0xFF, i & 0xFF)) for i in colour_map]

        super().__init__(scale)

    def set_resolution(self, width, height):
        total_pixels = width * height
        # Fill the offscreen RGB buffer with the background colour
        self.rgb_buffer = memoryview(bytearray(self.rgb_map[0] * total_pixels)) if total_pixels else None

        # Call superclass method so display size is known on the next refresh
        super().set_resolution(width, height)

    def set_pixel(self, x, y, colour):
        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_location = (y * self.width + x) * 3
        self.rgb_buffer[rgb_location:rgb_location + 3] = self.rgb_map[colour]

    def refresh_display(self, content_changed=False):
        if content_changed and self.rgb_buffer:
            render_surface = pygame.image.frombuffer(self.rgb_buffer, (self.width, self.height), "RGB")
            scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
            self.display_surface.blit(scaled_win, (0, 0))
            pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
