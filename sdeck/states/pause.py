#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .menu import Menu
from ..constants import ACTION_PAUSE
from ..signals import Pop

OPTION_RESUME = 0
OPTION_QUIT_TO_MENU = 1


class Pause(Menu):
    title = "Paused"
    options = ["Resume", "Quit to menu"]

    def choose(self, option_num):
        if option_num == OPTION_RESUME:
            return [Pop()]

        # Remove this state, then the game beneath it
        return [Pop(), Pop()]

    def handle_action(self, action):
        # Pressing pause again resumes, as well as choosing the option
        if action == ACTION_PAUSE:
            return [Pop()]

        return []
