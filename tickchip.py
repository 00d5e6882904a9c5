#!/usr/bin/env python3

__author__ = "TickChip Developers"
__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from tchip import main
from tchip.constants import DEFAULT_KEYMAP, SUPPORTED_RENDERERS


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-r", "--renderer", choices=SUPPORTED_RENDERERS,
        help="set the rendering, input, and audio systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 1024), and scale in Curses mode (default 2)"
    )
    parser.add_argument(
        "-m", "--mute", type=int, choices=[0, 1],
        help="mute the emulated audio.  0 = unmuted (default for PyGame), 1 = muted (default for Curses)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes (PyGame) or character numbers (Curses).  Separate each decimal with a comma"
    )
    parser.add_argument(
        "-p", "--palette",
        help="redefine the unlit and lit colours for the PyGame renderer in comma-separated hex, e.g. 000000,33FF66"
    )
    parser.add_argument(
        "--seed", type=int,
        help="seed the random number generator, so runs with the same inputs repeat exactly"
    )
    parser.add_argument(
        "--max_frames", type=int,
        help="stop after this many 60Hz frames (runs forever by default)"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


if __name__ == "__main__":
    args = vars(parse_args())
    # It is possible to start the interpreter from a GUI by calling this with a dictionary
    main(args)
