#!/usr/bin/env python3

"""
PyGame Input Plugin

Scans the PyGame event queue and turns key presses into logical actions for
the states.  Note that the check should only be called once per frame, as
constantly checking the queue is time consuming.

Closing the window requests that the program quits.  ESC acts as 'back', so
leaving the main menu with it also ends the program.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase
from ..constants import ACTION_UP, ACTION_DOWN, ACTION_SELECT, ACTION_BACK, ACTION_PAUSE

PYGAME_KEYMAP = {
    pygame.K_UP:        ACTION_UP,
    pygame.K_w:         ACTION_UP,
    pygame.K_DOWN:      ACTION_DOWN,
    pygame.K_s:         ACTION_DOWN,
    pygame.K_RETURN:    ACTION_SELECT,
    pygame.K_KP_ENTER:  ACTION_SELECT,
    pygame.K_SPACE:     ACTION_SELECT,
    pygame.K_ESCAPE:    ACTION_BACK,
    pygame.K_BACKSPACE: ACTION_BACK,
    pygame.K_p:         ACTION_PAUSE
}


class Inputs(InputsBase):
    def __init__(self, renderer, keymap=None, **kwargs):
        self.pygame_methods = {
            pygame.QUIT:    self._pygame_quit,
            pygame.KEYDOWN: self._pygame_keydown
        }

        super().__init__(renderer, keymap=PYGAME_KEYMAP if keymap is None else keymap, **kwargs)

    def process_messages(self):
        # Call PyGame method based on fast dictionary lookup of event
        quit_program = super().process_messages()

        for event in pygame.event.get():
            pygame_method = self.pygame_methods.get(event.type)

            if pygame_method and pygame_method(event):  # Check via short circuit that we don't have 'None'
                quit_program = True  # Process more events, even if planning to quit

        return quit_program

    def _pygame_quit(self, _):
        return True

    def _pygame_keydown(self, event):
        action = self.keymap_dict.get(event.key)

        if action is not None:
            self.pending_actions.append(action)

        return False
