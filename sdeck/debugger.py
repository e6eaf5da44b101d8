#!/usr/bin/env python3

"""
State Stack Debugger

If enabled, this will output a line whenever the state stack changes:
    * Pushing state 'name'  - A state was handed to the stack
    * Starting state 'name' - A state's entry hook is about to run
    * Popping state 'name'  - A state was released by the stack
    * Clearing n state(s)   - The whole stack is being emptied

The application loop also reports the number of frames drawn each second.

If a crash occurs, 'describe' can be used to dump the stack contents, from the
top state down, along with whether each state has been entered yet.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Debugger:
    def __init__(self):
        self.live = False

    def describe(self, stack):
        states = stack.get_items()
        started = stack.get_started_flags()

        if not states:
            return "States: (Empty)"

        debug_str = "States:"

        for depth, (state, is_started) in enumerate(zip(reversed(states), reversed(started))):
            debug_str += "\n{:>3} {}{}".format(
                depth, state.name, "" if is_started else " (not entered)"
            )

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, message):
        if self.live:
            print(message)
