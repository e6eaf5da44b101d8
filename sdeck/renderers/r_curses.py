#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws text in a standard Linux-style TTY Terminal, the Windows Command Prompt,
or PowerShell.

Pixel positions are mapped onto character cells using the text cell size, so
states can lay out their text once for every renderer.  Horizontal cells can
be stretched with the scale option.  RGB colours are matched to the nearest of
the eight standard terminal colours.

Terminals have no window title, so the title is drawn as an inverted bar on the
top line of the screen instead.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import _curses
from .r_null import Renderer as RendererBase, check_colour, check_position
from ..constants import TEXT_CELL_WIDTH, TEXT_CELL_HEIGHT

# Approximate RGB values of the standard terminal colours, in curses colour number order
CURSES_RGB = [
    (0x00, 0x00, 0x00),  # Black
    (0xCC, 0x00, 0x00),  # Red
    (0x00, 0xCC, 0x00),  # Green
    (0xCC, 0xCC, 0x00),  # Yellow
    (0x00, 0x00, 0xCC),  # Blue
    (0xCC, 0x00, 0xCC),  # Magenta
    (0x00, 0xCC, 0xCC),  # Cyan
    (0xCC, 0xCC, 0xCC)   # White
]


def nearest_curses_colour(rgb):
    r, g, b = rgb
    distances = [(r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2 for cr, cg, cb in CURSES_RGB]
    return distances.index(min(distances))


class Renderer(RendererBase):
    def __init__(self, scale=None, cursor_mode=0, **kwargs):
        if scale is None:
            scale = 1  # Default horizontal stretch if not supplied, or set to default

        self.screen = None
        self.cursor_mode = cursor_mode
        self.use_colour = False
        self.colour_pairs = {}
        super().__init__(scale, **kwargs)

    def init(self):
        super().init()
        self.screen = curses.initscr()
        curses.noecho()
        curses.cbreak()

        try:
            curses.curs_set(self.cursor_mode)
        except _curses.error:
            pass  # Some terminals cannot hide the cursor

        if curses.has_colors():
            curses.start_color()  # Only needed if not B/W
            curses.use_default_colors()
            self.use_colour = True

            # Pair numbers start at 1, as pair 0 cannot be changed
            for colour_num in range(len(CURSES_RGB)):
                curses.init_pair(colour_num + 1, colour_num, -1)

    def cleanup(self):
        if self.screen is not None:
            curses.nocbreak()
            curses.echo()

            if self.cursor_mode != 1:
                try:
                    curses.curs_set(1)
                except _curses.error:
                    pass

            curses.endwin()
            self.screen = None

        super().cleanup()

    def clear_screen(self):
        self.screen.erase()
        super().clear_screen()

    def flip(self):
        screen_height, screen_width = self.screen.getmaxyx()

        if self.title and screen_height > 0:
            self._add_clipped(0, 0, self.title.ljust(screen_width), curses.A_REVERSE)

        self.screen.refresh()
        super().flip()

    def draw_text(self, text, position, colour):
        x, y = check_position(position)
        rgb = check_colour(colour)
        attributes = curses.color_pair(nearest_curses_colour(rgb) + 1) if self.use_colour else curses.A_NORMAL
        self._add_clipped(y // TEXT_CELL_HEIGHT, (x // TEXT_CELL_WIDTH) * self.scale, text, attributes)
        super().draw_text(text, (x, y), rgb)

    def sleep(self, duration):
        curses.napms(duration)

    def _add_clipped(self, row, col, text, attributes):
        screen_height, screen_width = self.screen.getmaxyx()

        if row < 0 or row >= screen_height or col < 0 or col >= screen_width:
            return

        # Writing the furthest bottom-right character moves the cursor off screen, which Curses reports as an error
        try:
            self.screen.addstr(row, col, text[:screen_width - col], attributes)
        except _curses.error:
            pass

    # No Superclass for this Curses-specific method

    def get_curses_screen(self):
        return self.screen
