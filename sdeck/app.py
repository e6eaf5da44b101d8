#!/usr/bin/env python3

"""
Application Loop

Drives the state stack once per frame, in a fixed order:

    1. Stop if the stack is empty
    2. Start any states that haven't been entered.  If they returned signals,
       apply them and go back to step 1
    3. Clear the screen, draw the top state, and present the frame
    4. Update the top state.  If it returned signals, apply them and go back
       to step 1
    5. Wait for the frame delay, and go back to step 1

This means a freshly pushed state is always entered (along with anything it
pushes straight away) before it is drawn or updated, and that the stack is
never restructured part way through drawing.

If live debugging is enabled, the number of frames drawn per second is shown
in the window title and in the debug output.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_FRAME_DELAY

PERF_REPORT_INTERVAL = 1.0


class App:
    def __init__(self, stack, renderer, debugger, frame_delay=None, max_frames=None):
        self.stack = stack
        self.renderer = renderer
        self.debugger = debugger
        self.frame_delay = DEFAULT_FRAME_DELAY if frame_delay is None else frame_delay
        self.max_frames = max_frames  # 'None' runs until the stack empties

        # Performance-related vars
        self.frames_drawn = 0
        self.perf_counter_fps = 0
        self.next_perf_report_time = 0

    def run(self):
        while self.step():
            pass

    def step(self):
        # Run a single loop iteration.  Returns False once the stack is empty
        stack = self.stack

        if stack.is_empty():
            return False

        if self.max_frames is not None and self.frames_drawn >= self.max_frames:
            self.debugger.output("Frame limit reached")
            stack.clear()
            return False

        signals = stack.start()

        if signals:
            stack.process_signals(signals)
            return True

        self.renderer.clear_screen()
        stack.draw()
        self.renderer.flip()
        self.frames_drawn += 1
        self.perf_counter_fps += 1
        self.report_perf()

        signals = stack.update()

        if signals:
            stack.process_signals(signals)
            return True

        self.renderer.sleep(self.frame_delay)
        return True

    def report_perf(self):
        this_time = perf_counter()

        if this_time < self.next_perf_report_time:
            return

        self.next_perf_report_time = this_time + PERF_REPORT_INTERVAL

        if self.debugger.is_live():
            self.renderer.set_title("{} - {} FPS".format(APP_NAME, self.perf_counter_fps))
            self.debugger.output("{} frames drawn, {} per second".format(self.frames_drawn, self.perf_counter_fps))

        self.perf_counter_fps = 0
