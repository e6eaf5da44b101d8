#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from recording import RecordingState
from sdeck.app import App
from sdeck.debugger import Debugger
from sdeck.renderers.r_null import Renderer
from sdeck.signals import Push, Pop, Replace, Clear
from sdeck.stack import StateStack


class RecordingRenderer(Renderer):
    def __init__(self, log):
        super().__init__()
        self.log = log

    def clear_screen(self):
        self.log.append(("renderer", "clear_screen"))
        super().clear_screen()

    def flip(self):
        self.log.append(("renderer", "flip"))
        super().flip()

    def sleep(self, duration):
        self.log.append(("renderer", "sleep"))
        super().sleep(duration)


class TestApp(unittest.TestCase):
    def setUp(self):
        self.log = []
        self.stack = StateStack()
        self.renderer = RecordingRenderer(self.log)
        self.renderer.init()
        self.app = App(self.stack, self.renderer, Debugger(), frame_delay=0)

    def tearDown(self):
        self.renderer.cleanup()

    def test_app_empty_stack_terminates(self):
        self.assertFalse(self.app.step())
        self.app.run()
        self.assertEqual([], self.log)

    def test_app_frame_order(self):
        self.stack.push(RecordingState("A", self.log))
        del self.log[:]

        # Entry returned nothing, so the same iteration goes on to draw, update and pace
        self.assertTrue(self.app.step())
        self.assertEqual(
            [
                ("A", "enter"), ("renderer", "clear_screen"), ("A", "draw"), ("renderer", "flip"), ("A", "update"),
                ("renderer", "sleep")
            ],
            self.log
        )

        del self.log[:]
        self.assertTrue(self.app.step())
        self.assertEqual(
            [
                ("renderer", "clear_screen"), ("A", "draw"), ("renderer", "flip"), ("A", "update"),
                ("renderer", "sleep")
            ],
            self.log
        )
        self.assertEqual(2, self.app.frames_drawn)

    def test_app_entry_signals_skip_frame(self):
        state_b = RecordingState("B", self.log)
        self.stack.push(RecordingState("A", self.log, enter_signals=[Push(state_b)]))
        del self.log[:]
        self.app.step()
        self.assertEqual([("A", "enter"), ("B", "pushed")], self.log)
        self.assertEqual(0, self.app.frames_drawn)

    def test_app_no_draw_after_update_with_signals(self):
        state_b = RecordingState("B", self.log)
        self.stack.push(RecordingState("A", self.log, update_signals=[[Push(state_b)]]))
        self.app.step()

        # Nothing is drawn or paced once the update has asked for a change
        self.assertEqual([("A", "update"), ("B", "pushed")], self.log[-2:])
        self.assertNotIn(("renderer", "sleep"), self.log)

        # The next iteration enters B before drawing it, and never touches A
        del self.log[:]
        self.app.step()
        self.assertEqual(
            [
                ("B", "enter"), ("renderer", "clear_screen"), ("B", "draw"), ("renderer", "flip"), ("B", "update"),
                ("renderer", "sleep")
            ],
            self.log
        )

    def test_app_entry_chain_resolved_before_draw(self):
        state_c = RecordingState("C", self.log)
        state_b = RecordingState("B", self.log, enter_signals=[Push(state_c)])
        self.stack.push(RecordingState("A", self.log, enter_signals=[Push(state_b)]))
        self.app.step()  # Enter A, push B
        self.app.step()  # Enter B, push C
        self.app.step()  # Enter C, then draw and update it
        calls = [entry for entry in self.log if entry[0] != "renderer"]
        self.assertEqual(
            [
                ("A", "pushed"), ("A", "enter"), ("B", "pushed"), ("B", "enter"), ("C", "pushed"), ("C", "enter"),
                ("C", "draw"), ("C", "update")
            ],
            calls
        )

    def test_app_replace_enters_before_update(self):
        state_b = RecordingState("B", self.log)
        state_a = RecordingState("A", self.log, update_signals=[[Replace(state_b)]])
        self.stack.push(state_a)
        self.app.step()
        self.assertTrue(state_a.popped)
        self.assertEqual([state_b], self.stack.get_items())
        self.app.step()
        calls = [entry for entry in self.log if entry[0] == "B"]
        self.assertEqual([("B", "pushed"), ("B", "enter"), ("B", "draw"), ("B", "update")], calls)

    def test_app_clear_terminates(self):
        self.stack.push(RecordingState("A", self.log))
        self.stack.push(RecordingState("B", self.log, update_signals=[[Clear()]]))
        self.app.run()
        self.assertTrue(self.stack.is_empty())
        self.assertEqual(1, self.app.frames_drawn)
        self.assertFalse(self.app.step())

    def test_app_menu_game_scenario(self):
        game = RecordingState("Game", self.log, update_signals=[[Pop()]])
        menu = RecordingState("Menu", self.log, update_signals=[[Push(game)], [], [Pop()]])
        self.stack.push(menu)

        # The menu is entered, drawn and updated, and asks for the game
        self.app.step()
        self.assertEqual(["pushed", "enter", "draw", "update"], [e[1] for e in self.log if e[0] == "Menu"])
        self.assertEqual([menu, game], self.stack.get_items())

        # The game is entered, drawn and updated on its own, and pops itself
        del self.log[:]
        self.app.step()
        self.assertEqual([], [e for e in self.log if e[0] == "Menu"])
        self.assertEqual(["enter", "draw", "update", "popped"], [e[1] for e in self.log if e[0] == "Game"])
        self.assertEqual([menu], self.stack.get_items())

        # Back to the menu, without entering it again
        del self.log[:]
        self.app.step()
        self.assertEqual(["draw", "update"], [e[1] for e in self.log if e[0] == "Menu"])

        self.app.run()
        self.assertTrue(self.stack.is_empty())
        self.assertEqual(1, len(menu.calls("enter")))
        self.assertEqual(1, len(game.calls("enter")))

    def test_app_max_frames(self):
        state_a = RecordingState("A", self.log)
        self.stack.push(state_a)
        app = App(self.stack, self.renderer, Debugger(), frame_delay=0, max_frames=3)
        app.run()
        self.assertEqual(3, app.frames_drawn)
        self.assertEqual(3, self.renderer.frames_presented)
        self.assertTrue(state_a.popped)
        self.assertTrue(self.stack.is_empty())

    def test_app_perf_report_title(self):
        debugger = Debugger()
        debugger.set_live(True)
        debugger.output = lambda message: None
        self.stack.push(RecordingState("A", self.log))
        app = App(self.stack, self.renderer, debugger, frame_delay=0)
        app.step()
        self.assertEqual("StateDeck - 1 FPS", self.renderer.title)

    def test_app_perf_report_quiet(self):
        self.stack.push(RecordingState("A", self.log))
        self.app.step()
        self.assertEqual("", self.renderer.title)
