#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .menu import Menu
from .game import Game
from ..constants import APP_NAME
from ..signals import Push, Pop

OPTION_NEW_GAME = 0
OPTION_QUIT = 1


class MainMenu(Menu):
    title = APP_NAME
    options = ["New game", "Quit"]

    def choose(self, option_num):
        if option_num == OPTION_NEW_GAME:
            return [Push(Game(self.renderer, self.inputs))]

        # The main menu sits at the bottom of the stack, so popping it ends the program
        return [Pop()]
