#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

A script can be supplied for headless runs and tests.  This is a list of
batches, one batch consumed per poll, where each batch is a list of action
names.  A batch of 'None' requests that the program quits.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import deque
from ..constants import ACTIONS


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, renderer, keymap=None, script=None):
        self.renderer = renderer
        self.keymap_dict = {}
        self.pending_actions = []
        self.script = deque()

        if keymap is not None:
            for key_code, action in keymap.items():
                if action not in ACTIONS:
                    raise InputsError("Unknown action '{}' bound to key {}".format(action, key_code))

                self.keymap_dict[key_code] = action

        if script is not None:
            for batch in script:
                if batch is not None:
                    for action in batch:
                        if action not in ACTIONS:
                            raise InputsError("Unknown action '{}' in input script".format(action))

                self.script.append(batch)

    def process_messages(self):
        if not self.script:
            return False  # Don't exit the program

        batch = self.script.popleft()

        if batch is None:
            return True

        self.pending_actions.extend(batch)
        return False

    def get_actions(self):
        # Hand over every action seen since the last call
        actions = self.pending_actions
        self.pending_actions = []
        return actions

    def shutdown(self):
        pass
