#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 TickChip Developers"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from unittest import mock
from tchip import main, run, EmulationHalted
from tchip.audio.a_null import Audio
from tchip.constants import DEFAULT_KEYMAP
from tchip.cpu import CPU, CapacityError
from tchip.inputs.i_null import Inputs
from tchip.renderers.r_null import Renderer
from tickchip import parse_args


class RecordingAudio(Audio):
    def __init__(self):
        self.history = []
        super().__init__()

    def enable_buzzer(self, enabled):
        self.history.append(enabled)
        return super().enable_buzzer(enabled)


class ScriptedInputs(Inputs):
    def __init__(self, keypads, quit_after=None):
        self.keypads = list(keypads)
        self.quit_after = quit_after
        self.polls = 0
        super().__init__(DEFAULT_KEYMAP, None)

    def process_messages(self):
        self.polls += 1
        return self.quit_after is not None and self.polls > self.quit_after

    def get_keypad(self):
        return self.keypads.pop(0) if self.keypads else 0


class TestRun(unittest.TestCase):
    def setUp(self):
        self.cpu = CPU()
        self.renderer = Renderer()
        self.audio = RecordingAudio()

    def _run(self, program, inputs=None, max_frames=3):
        self.cpu.load_program(program)
        inputs = ScriptedInputs([]) if inputs is None else inputs
        return run(self.cpu, self.renderer, inputs, self.audio, max_frames=max_frames, frame_interval=0)

    def test_run_max_frames(self):
        self.assertEqual(3, self._run(b"\x00\xE0\x12\x02"))
        self.assertEqual((64, 32), (self.renderer.width, self.renderer.height))

    def test_run_quit(self):
        self.assertEqual(2, self._run(b"\x12\x00", ScriptedInputs([], quit_after=2), max_frames=None))

    def test_run_keypad(self):
        # Wait for a key, then loop
        self._run(b"\xF3\x0A\x12\x02", ScriptedInputs([0, 0, 1 << 0xB]))
        self.assertEqual(0xB, self.cpu.v[0x3])
        self.assertEqual(0x202, self.cpu.pc)

    def test_run_buzzer(self):
        # LD V0, 2; LD ST, V0; loop
        self._run(b"\x60\x02\xF0\x18\x12\x04", max_frames=4)
        self.assertEqual([True, True, False, False], self.audio.history)

    def test_run_halts_with_debug_info(self):
        with self.assertRaises(EmulationHalted) as context:
            self._run(b"\x60\x01\x00\x00")

        message = str(context.exception)
        self.assertIn("Invalid opcode 0000", message)
        self.assertIn("PC: 0x202", message)
        self.assertIn("Stack: (Empty)", message)


class TestMain(unittest.TestCase):
    def _args(self, filename, **kwargs):
        args = {
            "filename": filename,
            "renderer": "null",
            "scale": None,
            "mute": None,
            "keymap": None,
            "palette": None,
            "seed": 42,
            "max_frames": 2
        }
        args.update(kwargs)
        return args

    def _write_rom(self, tmp_dir, data):
        filename = os.path.join(tmp_dir, "rom.ch8")

        with open(filename, "wb") as f:
            f.write(data)

        return filename

    def test_main_null_renderer(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = self._write_rom(tmp_dir, b"\x00\xE0\xC0\xFF\x12\x02")
            self.assertEqual(2, main(self._args(filename)))

    def test_main_rom_too_large(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = self._write_rom(tmp_dir, bytes(3585))
            self.assertRaises(CapacityError, main, self._args(filename))

    def test_main_missing_rom(self):
        self.assertRaises(FileNotFoundError, main, self._args("NoFile.ch8"))

    def test_main_audio_failure_shuts_down_plugins(self):
        class BrokenAudio(Audio):
            def __init__(self):
                raise RuntimeError("No audio device")

        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = self._write_rom(tmp_dir, b"\x12\x00")

            with mock.patch("tchip.audio.a_null.Audio", BrokenAudio), \
                    mock.patch.object(Renderer, "shutdown") as renderer_shutdown, \
                    mock.patch.object(Inputs, "shutdown") as inputs_shutdown:
                self.assertRaises(RuntimeError, main, self._args(filename))

        renderer_shutdown.assert_called_once_with()
        inputs_shutdown.assert_called_once_with()


class TestArgs(unittest.TestCase):
    def test_args_defaults(self):
        args = vars(parse_args(["game.ch8"]))
        self.assertEqual("game.ch8", args["filename"])
        self.assertEqual(DEFAULT_KEYMAP, args["keymap"])

        for option in "renderer", "scale", "mute", "palette", "seed", "max_frames":
            self.assertIsNone(args[option])

    def test_args_options(self):
        args = vars(parse_args(["game.ch8", "-r", "null", "-s", "3", "--seed", "7", "--max_frames", "60"]))
        self.assertEqual("null", args["renderer"])
        self.assertEqual(3, args["scale"])
        self.assertEqual(7, args["seed"])
        self.assertEqual(60, args["max_frames"])
