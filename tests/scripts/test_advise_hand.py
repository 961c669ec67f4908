"""Tests for the advise_hand command-line script."""

from __future__ import annotations

import importlib.util
import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "advise_hand.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("advise_hand", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class AdviseHandScriptTests(unittest.TestCase):
    def setUp(self) -> None:
        self.script = _load_script()

    def _run(self, argv: list[str]) -> tuple[int, str, str]:
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = self.script.main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_prints_all_three_tiers(self) -> None:
        code, out, err = self._run(["--hand", "Js9s"])
        self.assertEqual(code, 0)
        self.assertEqual(err, "")
        self.assertIn("Parsed hand: J9s (J♠ 9♠)", out)
        self.assertIn("[Green-light] build pots", out)
        self.assertIn("[Yellow-light] realize cheap", out)
        self.assertIn("[Red-light] let it go", out)
        self.assertLess(out.index("[Green-light]"), out.index("[Yellow-light]"))
        self.assertLess(out.index("[Yellow-light]"), out.index("[Red-light]"))
        self.assertIn("Strong combo equity (OESDs/GS + backdoors)", out)
        self.assertIn("e.g. 9♠8x | Q♠9x | 8♠7♠ x", out)

    def test_invalid_hand_exits_with_status_two(self) -> None:
        code, out, err = self._run(["--hand", "AhAh"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("Invalid hand 'AhAh'", err)
        self.assertIn("duplicate card Ah", err)

    def test_max_examples_truncates_each_entry(self) -> None:
        code, out, _ = self._run(["--hand", "Js9s", "--max-examples", "1"])
        self.assertEqual(code, 0)
        example_lines = [line for line in out.splitlines() if line.strip().startswith("e.g.")]
        self.assertTrue(example_lines)
        for line in example_lines:
            self.assertNotIn(" | ", line)
        self.assertIn("e.g. 9♠8x", out)
        self.assertNotIn("Q♠9x", out)

    def test_random_hand_renders(self) -> None:
        code, out, _ = self._run(["--random"])
        self.assertEqual(code, 0)
        self.assertIn("[Red-light]", out)


if __name__ == "__main__":
    unittest.main()
