#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from sdeck.renderers.r_null import Renderer, RendererError, check_colour, check_position


class TestNullRenderer(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer()
        self.renderer.init()

    def tearDown(self):
        self.renderer.cleanup()

    def test_renderer_init_once(self):
        self.assertTrue(self.renderer.is_initialised)
        self.assertRaises(RendererError, self.renderer.init)
        self.renderer.cleanup()
        self.assertFalse(self.renderer.is_initialised)

    def test_renderer_frame(self):
        self.renderer.draw_text("Hello", (8, 16), (0xFF, 0x00, 0x80))
        self.assertEqual([("Hello", (8, 16), (0xFF, 0x00, 0x80))], self.renderer.text_drawn)
        self.renderer.flip()
        self.assertEqual(1, self.renderer.frames_presented)

        # Clearing the screen starts a new list of drawn text
        self.renderer.clear_screen()
        self.assertEqual([], self.renderer.text_drawn)

    def test_renderer_sleep(self):
        # Only checks it runs, doesn't check timing
        self.renderer.sleep(0)
        self.renderer.sleep(1)

    def test_renderer_title(self):
        self.renderer.set_title("Title")
        self.assertEqual("Title", self.renderer.title)

    def test_check_colour(self):
        self.assertEqual((1, 2, 3), check_colour([1, 2, 3]))

        for colour in (None, (1, 2), (1, 2, 3, 4), (0, 0, 256), (-1, 0, 0), (0.5, 0, 0)):
            self.assertRaises(RendererError, check_colour, colour)

    def test_check_position(self):
        self.assertEqual((3, 4), check_position((3.9, 4)))
        self.assertRaises(RendererError, check_position, 3)
        self.assertRaises(RendererError, check_position, ("a", "b"))
        self.assertRaises(RendererError, check_position, (None, 1))
        self.assertRaises(RendererError, self.renderer.draw_text, "Bad", (1, 2, 3), (0, 0, 0))


try:
    from sdeck.renderers.r_curses import nearest_curses_colour
    HAVE_CURSES = True
except ImportError:
    HAVE_CURSES = False


@unittest.skipUnless(HAVE_CURSES, "Curses is not installed")
class TestCursesColours(unittest.TestCase):
    def test_exact_colours(self):
        self.assertEqual(0, nearest_curses_colour((0x00, 0x00, 0x00)))
        self.assertEqual(7, nearest_curses_colour((0xCC, 0xCC, 0xCC)))

    def test_nearest_colours(self):
        self.assertEqual(7, nearest_curses_colour((0xFF, 0xFF, 0xFF)))
        self.assertEqual(2, nearest_curses_colour((0x00, 0xC8, 0x00)))
        self.assertEqual(4, nearest_curses_colour((0x0A, 0x0A, 0xC8)))
        self.assertEqual(1, nearest_curses_colour((0xDD, 0x55, 0x55)))
        self.assertEqual(6, nearest_curses_colour((0x20, 0xB0, 0xE0)))
