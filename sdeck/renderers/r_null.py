#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if nothing needs to be
displayed, for example when running headless with only debug output.  It
keeps a count of presented frames and a list of the text drawn since the last
screen clear, so tests can check what the states asked for.

Pacing still happens, so a headless run does not spin the host CPU.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import sleep as host_sleep


class RendererError(Exception):
    pass


def check_colour(colour):
    try:
        r, g, b = colour
    except (TypeError, ValueError):
        raise RendererError("Colours must be RGB triples.") from None

    for channel in r, g, b:
        if not isinstance(channel, int) or not 0 <= channel <= 0xFF:
            raise RendererError("Colour channels must be integers from 0 to 255.")

    return r, g, b


def check_position(position):
    try:
        x, y = position
        return int(x), int(y)
    except (TypeError, ValueError):
        raise RendererError("Positions must be (x, y) pairs of numbers.") from None


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.title = ""
        self.is_initialised = False
        self.frames_presented = 0
        self.text_drawn = []

    def init(self):
        if self.is_initialised:
            raise RendererError("Renderer already initialised.")

        self.is_initialised = True

    def cleanup(self):
        self.is_initialised = False

    def clear_screen(self):
        self.text_drawn = []

    def flip(self):
        self.frames_presented += 1

    def draw_text(self, text, position, colour):
        self.text_drawn.append((text, check_position(position), check_colour(colour)))

    def sleep(self, duration):
        # Duration is in milliseconds
        if duration > 0:
            host_sleep(duration / 1000.0)

    def set_title(self, title):
        self.title = title
