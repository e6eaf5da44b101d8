#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the application, replacing args with a
dictionary of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .app import App
from .constants import APP_INTRO, APP_COPYRIGHT
from .debugger import Debugger
from .stack import StateStack
from .states.intro import Intro


class StartupError(Exception):
    pass


def load_backend(opt_renderer):
    # Returns the Renderer and Inputs classes for the chosen backend
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer
            return Renderer, Inputs

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer
            return Renderer, Inputs

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        return Renderer, Inputs

    raise StartupError("Unknown renderer '{}'.".format(opt_renderer))


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    Renderer, Inputs = load_backend(args["renderer"])

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    reenter_on_reveal = args["reenter_on_reveal"]
    stack = StateStack(
        size=args["max_depth"],
        reenter_on_reveal=False if reenter_on_reveal is None else bool(reenter_on_reveal),
        debugger=debugger
    )

    # The renderer is brought up before the inputs, as some input plugins read from the renderer's window
    renderer = Renderer(scale=args["scale"])
    renderer.init()
    inputs = None

    try:
        inputs = Inputs(renderer)

        # The stack takes ownership of the first state.  Nothing else keeps hold of it
        stack.push(Intro(renderer, inputs))

        app = App(stack, renderer, debugger, frame_delay=args["frame_delay"], max_frames=args["max_frames"])
        app.run()
    except Exception:
        if debugger.is_live():
            print(debugger.describe(stack))

        raise
    finally:
        # Release any states left behind by a crash, then shut down input and rendering.  __del__ cannot be relied
        # upon when using PyPy
        stack.shutdown()

        if inputs is not None:
            inputs.shutdown()

        renderer.cleanup()
