#!/usr/bin/env python3

"""
Intro State

Shows the application name for a short while, then replaces itself with the
main menu.  Any key skips straight to the menu.

With zero frames, 'enter' replaces the intro immediately, so the menu is
pushed and entered before anything is ever drawn.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .base import State
from .main_menu import MainMenu
from ..constants import APP_NAME, APP_VERSION, COLOUR_GREEN, COLOUR_GREY, INTRO_FRAMES, TEXT_CELL_HEIGHT, TEXT_CELL_WIDTH
from ..signals import Replace, Clear


class Intro(State):
    def __init__(self, renderer=None, inputs=None, frames=INTRO_FRAMES):
        super().__init__(renderer, inputs)
        self.frames = frames
        self.frames_left = frames

    def enter(self):
        self.frames_left = self.frames

        if self.frames_left <= 0:
            return self._next_state()

        return []

    def update(self):
        quit_program, actions = self.read_inputs()

        if quit_program:
            return [Clear()]

        self.frames_left -= 1

        if actions or self.frames_left <= 0:
            return self._next_state()

        return []

    def draw(self):
        self.renderer.draw_text(APP_NAME, (TEXT_CELL_WIDTH * 4, TEXT_CELL_HEIGHT * 4), COLOUR_GREEN)
        self.renderer.draw_text(
            "Version {}".format(APP_VERSION), (TEXT_CELL_WIDTH * 4, TEXT_CELL_HEIGHT * 6), COLOUR_GREY
        )

    def _next_state(self):
        return [Replace(MainMenu(self.renderer, self.inputs))]
