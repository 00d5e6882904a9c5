#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the interpreter, replacing args with a
dictionary of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.

The CPU itself has no idea how fast real time passes.  The loop in run() asks
it for one frame of execution at a time, shows the result, and then sleeps
until the next 60Hz tick is due.
"""

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from time import perf_counter, sleep
from .constants import APP_INTRO, APP_COPYRIGHT, APP_NAME, DEFAULT_KEYMAP, FRAME_INTERVAL
from .cpu import CPU, CPUError
from .debugger import Debugger
from .decoder import InvalidOpcode
from .hostio import Loader
from .ram import RAMError
from .stack import StackError


class StartupError(Exception):
    pass


class EmulationHalted(Exception):
    pass


def run(cpu, renderer, inputs, audio, max_frames=None, frame_interval=FRAME_INTERVAL):
    # Returns the number of frames executed
    debugger = Debugger()
    frames = 0
    perf_counter_fps = 0
    next_perf_report_time = 0
    next_frame_time = perf_counter()

    while max_frames is None or frames < max_frames:
        if inputs.process_messages():  # User asked to quit
            break

        cpu.keypad = inputs.get_keypad()

        try:
            cpu.frame()
        except (CPUError, InvalidOpcode, StackError, RAMError) as err:
            raise EmulationHalted(
                "Emulation halted.\n\n{}\n\n{}Debug info:\n{}".format(err, APP_INTRO, debugger.debug(cpu))
            ) from err

        audio.enable_buzzer(cpu.st > 0)
        renderer.draw(cpu.framebuffer)
        frames += 1
        perf_counter_fps += 1

        this_time = perf_counter()

        if this_time >= next_perf_report_time:
            next_perf_report_time = this_time + 1.0
            renderer.set_title("{} - {} FPS".format(APP_NAME, perf_counter_fps))
            perf_counter_fps = 0

        # Wait for the next frame.  If we have fallen behind, don't try to catch up with a burst of frames.
        next_frame_time += frame_interval
        delay = next_frame_time - perf_counter()

        if delay > 0:
            sleep(delay)
        else:
            next_frame_time = perf_counter()

    return frames


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    opt_renderer = args["renderer"]
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.
    mute_audio = args["mute"]

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
            opt_renderer = "pygame"
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

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

            # Terminals can only beep, so stay quiet unless asked
            if mute_audio or mute_audio is None:
                from .audio.a_null import Audio
            else:
                from .audio.a_curses import Audio

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio

    # Load the ROM before opening any windows, so an oversized ROM is reported straight away
    seed = args["seed"]
    cpu = CPU(rng=None if seed is None else Random(seed))
    cpu.load_program(Loader().load_binary(args["filename"]))

    renderer = Renderer(scale=args["scale"], palette=args["palette"])

    # Each plugin is shut down even if a later one fails to start, so a terminal is never left in Curses mode.
    # __del__ cannot be relied upon when using PyPy.
    try:
        inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, renderer)

        try:
            audio = Audio()

            try:
                return run(cpu, renderer, inputs, audio, max_frames=args["max_frames"])
            finally:
                audio.shutdown()
        finally:
            inputs.shutdown()
    finally:
        renderer.shutdown()
