#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "StateDeck"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Startup
SUPPORTED_RENDERERS = ["pygame", "curses", "null"]

# Frame pacing in milliseconds, slept once per fully settled frame (roughly 60Hz)
DEFAULT_FRAME_DELAY = 16

# Window size in pixels (PyGame), and the pixel size of a single text cell.  Curses maps pixel positions onto
# character cells using the cell size, so states can lay out text once for every renderer
DEFAULT_WINDOW_WIDTH = 640
DEFAULT_WINDOW_HEIGHT = 480
TEXT_CELL_WIDTH = 8
TEXT_CELL_HEIGHT = 16

# Colours as 8-bit RGB triples
COLOUR_WHITE = (0xDD, 0xDD, 0xDD)
COLOUR_GREY = (0x88, 0x88, 0x88)
COLOUR_GREEN = (0x00, 0xDD, 0x88)
COLOUR_RED = (0xDD, 0x55, 0x55)
COLOUR_YELLOW = (0xDD, 0xDD, 0x55)
COLOUR_BACKGROUND = (0x22, 0x22, 0x22)

# Logical input actions delivered to states
ACTION_UP = "up"
ACTION_DOWN = "down"
ACTION_SELECT = "select"
ACTION_BACK = "back"
ACTION_PAUSE = "pause"
ACTIONS = [ACTION_UP, ACTION_DOWN, ACTION_SELECT, ACTION_BACK, ACTION_PAUSE]

# Default key bindings.  Terminal characters are mapped in the Curses plugin, as these are not keyscan codes
CURSES_KEYMAP = {
    ord("w"): ACTION_UP,
    ord("k"): ACTION_UP,
    ord("s"): ACTION_DOWN,
    ord("j"): ACTION_DOWN,
    10: ACTION_SELECT,  # Enter
    13: ACTION_SELECT,  # Carriage return on some terminals
    ord(" "): ACTION_SELECT,
    ord("b"): ACTION_BACK,
    127: ACTION_BACK,   # Backspace
    ord("p"): ACTION_PAUSE
}

# Demo states
INTRO_FRAMES = 90  # Roughly 1.5 seconds at the default frame delay
GAME_TARGET_SCORE = 10
