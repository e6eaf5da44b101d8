#!/usr/bin/env python3

"""
Curses TTY Terminal Input Plugin

Uses a thread to trap Terminal inputs and redirects them to the application
loop as logical actions.  The thread only ever talks to the loop through a
bounded queue, and never touches the state stack.

We will quit if ESC (char 27) or CTRL+C (char 3) is detected.

Note that using the 'nodelay(True)' setting instead of blocking inside a thread
is slightly slower, and can lag, due to constant external calls.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import queue
from threading import Thread
from .i_null import Inputs as InputsBase
from ..constants import ACTION_UP, ACTION_DOWN, ACTION_BACK, CURSES_KEYMAP

# Special keys only make sense when the screen has keypad mode enabled
CURSES_SPECIAL_KEYMAP = {
    curses.KEY_UP:        ACTION_UP,
    curses.KEY_DOWN:      ACTION_DOWN,
    curses.KEY_BACKSPACE: ACTION_BACK
}


# For thread safety, use proper queues to exchange information, avoiding shared variables.
def input_thread(thread_quitter_queue, input_queue, keymap_dict, curses_screen):
    while thread_quitter_queue.empty():
        # This blocks the thread from proceeding, so it won't get the quit message until at least one key is pressed.
        # However, if set as a daemon thread, it should be terminated when the main thread shuts down.
        char = curses_screen.getch()

        if char == 27 or char == 3:  # Detect ESC or CTRL+C
            input_queue.put(None, block=True)
            break

        if 0 <= char < 0x100:
            char = ord(chr(char).lower())

        action = keymap_dict.get(char)

        if action is not None:
            try:
                input_queue.put(action, block=False)
            except queue.Full:
                pass


class Inputs(InputsBase):
    def __init__(self, renderer, keymap=None, **kwargs):
        if keymap is None:
            keymap = dict(CURSES_KEYMAP)
            keymap.update(CURSES_SPECIAL_KEYMAP)

        super().__init__(renderer, keymap=keymap, **kwargs)

        curses_screen = renderer.get_curses_screen()
        curses_screen.keypad(True)

        self.thread_quitter_queue = queue.Queue(1)  # Used to inform the thread it should quit
        self.input_queue = queue.Queue(16)
        self.thread = Thread(
            target=input_thread,
            args=(
                self.thread_quitter_queue,
                self.input_queue,
                self.keymap_dict,
                curses_screen
            )
        )
        # Terminate the thread when the main program quits (even if currently waiting for a keypress)
        self.thread.daemon = True
        self.thread.start()

    def process_messages(self):
        quit_program = super().process_messages()

        while True:
            try:
                # Blocking here would lock up the main thread if nothing was pressed
                action = self.input_queue.get(block=False)
            except queue.Empty:
                break
            else:
                if action is None:
                    return True

                self.pending_actions.append(action)

        return quit_program

    def shutdown(self):
        try:
            self.thread_quitter_queue.put(None, block=False)
        except queue.Full:
            # Something else has already requested the thread quits
            pass

        # Don't wait for the thread to quit (because this is likely to happen after a keypress)
        super().shutdown()
