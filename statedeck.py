#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from sdeck import main
from sdeck.constants import SUPPORTED_RENDERERS


def parse_args():
    parser = ArgumentParser()
    parser.add_argument(
        "-r", "--renderer", choices=SUPPORTED_RENDERERS,
        help="set the rendering and input systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 640), and horizontal stretch in Curses mode (default 1)"
    )
    parser.add_argument(
        "-f", "--frame_delay", type=int,
        help="set the pause after each settled frame in milliseconds (default 16)"
    )
    parser.add_argument(
        "--reenter_on_reveal", type=int, choices=[0, 1],
        help="re-run a state's entry hook when the state above it is popped.  0 = off (default), 1 = on"
    )
    parser.add_argument(
        "--max_depth", type=int,
        help="limit how many states can be stacked at once (unlimited by default)"
    )
    parser.add_argument(
        "--max_frames", type=int,
        help="quit after drawing this many frames, which is mainly useful with the null renderer"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output of state stack changes and frame rates"
    )
    return parser.parse_args()  # Can call sys.exit(2) if args are incorrect


def cli():
    args = vars(parse_args())
    # It is possible to start the application from a GUI by calling main with a dictionary
    main(args)


if __name__ == "__main__":
    cli()
