#!/usr/bin/env python3

"""
Base State

Serves as a base class for every state.  Each method does nothing, so a state
only needs to override what it uses.

    * enter     - Called once, the first time the stack starts the state.  May
                  return signals, e.g. to push another state straight away
    * update    - Called once per frame while the state is on top.  Returns
                  signals to restructure the stack
    * draw      - Called once per frame while the state is on top.  Must only
                  draw, never change the stack
    * on_pushed - Called when the stack takes ownership of the state
    * on_popped - Called when the stack releases the state

Returning 'None' from 'enter' or 'update' is the same as returning no signals.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class State:
    def __init__(self, renderer=None, inputs=None):
        self.renderer = renderer
        self.inputs = inputs

    @property
    def name(self):
        # Descriptive name for debug output
        return type(self).__name__

    def enter(self):
        return []

    def update(self):
        return []

    def draw(self):
        pass

    def on_pushed(self):
        pass

    def on_popped(self):
        pass

    def read_inputs(self):
        # Returns (quit requested, actions since last frame)
        if self.inputs is None:
            return False, []

        quit_program = self.inputs.process_messages()
        return quit_program, self.inputs.get_actions()
