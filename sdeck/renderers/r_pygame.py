#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws text onto an SDL window surface via PyGame.  Text is rendered with the
default PyGame font, sized to fit a single text cell, and blitted with its top
left corner at the requested pixel position.

Rendered glyph surfaces are cached by text and colour, since menus redraw the
same strings every frame.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import Renderer as RendererBase, check_colour, check_position
from ..constants import APP_NAME, COLOUR_BACKGROUND, DEFAULT_WINDOW_WIDTH, TEXT_CELL_HEIGHT

TEXT_CACHE_LIMIT = 256


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = DEFAULT_WINDOW_WIDTH  # Default window width if not supplied, or set to default

        self.display_surface = None
        self.font = None
        self.text_cache = {}
        self.window_size = (scale, scale * 3 // 4)
        super().__init__(scale, **kwargs)

    def init(self):
        super().init()
        pygame.display.init()
        pygame.font.init()
        self.display_surface = pygame.display.set_mode(self.window_size)
        self.font = pygame.font.Font(None, TEXT_CELL_HEIGHT + TEXT_CELL_HEIGHT // 2)
        self.set_title(APP_NAME)

    def cleanup(self):
        # PyGame currently segfaults if display.quit is called via __del__
        self.text_cache.clear()
        self.font = None
        self.display_surface = None
        pygame.font.quit()
        pygame.display.quit()
        super().cleanup()

    def clear_screen(self):
        self.display_surface.fill(COLOUR_BACKGROUND)
        super().clear_screen()

    def flip(self):
        pygame.display.flip()
        super().flip()

    def draw_text(self, text, position, colour):
        rgb = check_colour(colour)
        key = (text, rgb)
        text_surface = self.text_cache.get(key)

        if text_surface is None:
            if len(self.text_cache) >= TEXT_CACHE_LIMIT:
                self.text_cache.clear()

            text_surface = self.font.render(text, True, rgb)
            self.text_cache[key] = text_surface

        self.display_surface.blit(text_surface, check_position(position))
        super().draw_text(text, position, rgb)

    def sleep(self, duration):
        pygame.time.wait(duration)

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)
