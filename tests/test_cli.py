import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from game2048_core.cli import main as cli_main
from game import run_slide_cases


class TestCli(unittest.TestCase):
    def setUp(self):
        self._td = tempfile.TemporaryDirectory()
        self.dir = self._td.name
        self._env = patch.dict(os.environ, {"GAME2048_DIR": self.dir})
        self._env.start()

    def tearDown(self):
        self._env.stop()
        self._td.cleanup()

    def _run(self, argv, keys):
        out = io.StringIO()
        with patch("builtins.input", side_effect=keys), redirect_stdout(out):
            code = cli_main(argv)
        return code, out.getvalue()

    def test_given_self_test_flag_when_running_then_all_rows_pass(self):
        self.assertEqual(run_slide_cases(), [])
        code, out = self._run(["-t"], [])
        self.assertEqual(code, 0)
        self.assertIn("tests executed successfully", out)

    def test_given_quit_confirmed_when_playing_then_score_logged(self):
        code, out = self._run(["--seed", "3"], ["a", "d", "zz", "q", "y"])
        self.assertEqual(code, 0)
        self.assertIn("pts", out)
        with open(os.path.join(self.dir, "score.txt"), encoding="utf-8") as f:
            lines = f.read().splitlines()
        self.assertEqual(len(lines), 1)
        stamp, score = lines[0].split("\t")
        self.assertTrue(stamp.isdigit())
        self.assertTrue(score.isdigit())

    def test_given_quit_declined_when_playing_then_game_continues(self):
        code, _ = self._run(["--seed", "3"], ["q", "n", "q", "y"])
        self.assertEqual(code, 0)
        with open(os.path.join(self.dir, "score.txt"), encoding="utf-8") as f:
            self.assertEqual(len(f.read().splitlines()), 1)

    def test_given_save_and_exit_when_loading_then_resumed_once(self):
        code, out = self._run(["--seed", "8"], ["x"])
        self.assertEqual(code, 0)
        self.assertIn("State written.", out)
        state_file = os.path.join(self.dir, "state")
        self.assertTrue(os.path.isfile(state_file))
        self.assertFalse(os.path.exists(os.path.join(self.dir, "score.txt")))

        code, out = self._run(["--load"], ["q", "y"])
        self.assertEqual(code, 0)
        self.assertIn("State loaded.", out)
        self.assertFalse(os.path.exists(state_file))

    def test_given_corrupt_save_when_loading_then_fresh_game(self):
        with open(os.path.join(self.dir, "state"), "wb") as f:
            f.write(b"\x00\x01")
        code, out = self._run(["--load", "--seed", "1"], ["q", "y"])
        self.assertEqual(code, 0)
        self.assertIn("corrupt", out)

    def test_given_closed_input_when_playing_then_error_and_score_logged(self):
        code, out = self._run(["--seed", "2"], EOFError())
        self.assertEqual(code, 1)
        self.assertIn("Cannot read keyboard input", out)
        self.assertTrue(os.path.isfile(os.path.join(self.dir, "score.txt")))

    def test_given_input_closed_at_confirmation_when_quitting_then_error_and_score_logged(self):
        code, out = self._run(["--seed", "3"], ["q", EOFError()])
        self.assertEqual(code, 1)
        self.assertIn("Cannot read keyboard input", out)
        with open(os.path.join(self.dir, "score.txt"), encoding="utf-8") as f:
            self.assertEqual(len(f.read().splitlines()), 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
