#!/usr/bin/env python3

"""
Menu State

Base class for states showing a vertical list of options.  'up' and 'down'
move the highlight, wrapping at either end, and 'select' calls 'choose' with
the highlighted option's index.  'back' calls 'go_back', and any other action is
passed to 'handle_action'.

Subclasses return signals from 'choose' and 'go_back' to decide what happens.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .base import State
from ..constants import (
    ACTION_UP, ACTION_DOWN, ACTION_SELECT, ACTION_BACK, COLOUR_WHITE, COLOUR_GREY, COLOUR_GREEN, TEXT_CELL_WIDTH,
    TEXT_CELL_HEIGHT
)
from ..signals import Pop, Clear

MENU_LEFT = TEXT_CELL_WIDTH * 4
MENU_TITLE_TOP = TEXT_CELL_HEIGHT * 2
MENU_OPTIONS_TOP = TEXT_CELL_HEIGHT * 5


class Menu(State):
    title = ""
    options = []

    def __init__(self, renderer=None, inputs=None):
        super().__init__(renderer, inputs)
        self.selected = 0

    def enter(self):
        self.selected = 0
        return []

    def update(self):
        quit_program, actions = self.read_inputs()

        if quit_program:
            return [Clear()]

        for action in actions:
            if action == ACTION_UP:
                self.selected = (self.selected - 1) % len(self.options)
            elif action == ACTION_DOWN:
                self.selected = (self.selected + 1) % len(self.options)
            elif action == ACTION_SELECT:
                return self.choose(self.selected)
            elif action == ACTION_BACK:
                return self.go_back()
            else:
                signals = self.handle_action(action)

                if signals:
                    return signals

        return []

    def draw(self):
        self.renderer.draw_text(self.title, (MENU_LEFT, MENU_TITLE_TOP), COLOUR_GREEN)

        for option_num, option in enumerate(self.options):
            if option_num == self.selected:
                text, colour = "> " + option, COLOUR_WHITE
            else:
                text, colour = "  " + option, COLOUR_GREY

            self.renderer.draw_text(text, (MENU_LEFT, MENU_OPTIONS_TOP + option_num * TEXT_CELL_HEIGHT), colour)

    def choose(self, option_num):  # pylint: disable=unused-argument
        return []

    def go_back(self):
        return [Pop()]

    def handle_action(self, action):  # pylint: disable=unused-argument
        # Called for actions the menu itself does not use
        return []
