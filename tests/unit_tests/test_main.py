"""Tests for the command line entry point."""

import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from persian_date_limiter.__main__ import main


class TestMain(unittest.TestCase):
    """Test cases for the persian-date-limiter command."""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.state_file_path = str(Path(self.temp_dir.name) / "state.json")
        argv_patch = patch("sys.argv", ["prog"])
        argv_patch.start()
        self.addCleanup(argv_patch.stop)

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def _run(self, *argv: str):
        stdout = io.StringIO()
        with patch("sys.stdout", stdout):
            code = main(["--time_zone", "UTC", "--state_file_path", self.state_file_path, *argv])
        return code, stdout.getvalue().strip()

    def test_to_persian(self) -> None:
        code, output = self._run("to-persian", "2024-01-12")
        self.assertEqual(code, 0)
        self.assertEqual(output, "1402/10/22\tجمعه  22  دی  1402")

    def test_to_gregorian(self) -> None:
        code, output = self._run("to-gregorian", "۱۴۰۲/۱۰/۲۲")
        self.assertEqual(code, 0)
        self.assertEqual(output, "2024-01-12")

    def test_check(self) -> None:
        """Disabled days are reported out of range."""
        code, output = self._run("check", "1402/10/22", "--disabled", "1402/10/22")
        self.assertEqual(code, 0)
        self.assertEqual(output, "out of range")

        _, output = self._run("check", "1402/10/23", "--disabled", "1402/10/22")
        self.assertEqual(output, "in range")

    def test_nearest(self) -> None:
        code, output = self._run("nearest", "1402/10/22", "--disabled", "1402/10/22")
        self.assertEqual(code, 0)
        self.assertEqual(output, "1402/10/21")

    def test_nearest_selectable(self) -> None:
        _, output = self._run(
            "nearest", "1402/10/22", "--selectable", "1402/10/20", "1402/10/25", "1402/10/30"
        )
        self.assertEqual(output, "1402/10/20")

    def test_invalid_date(self) -> None:
        """Dates that do not exist exit with code 2."""
        code, output = self._run("to-gregorian", "1402/12/30")
        self.assertEqual(code, 2)
        self.assertEqual(output, "")

        code, _ = self._run("to-persian", "2024-13-01")
        self.assertEqual(code, 2)

    def test_inverted_dates(self) -> None:
        code, _ = self._run("check", "1402/10/22", "--min_date", "1402/10/25", "--max_date", "1402/10/20")
        self.assertEqual(code, 2)

    def test_save_then_load(self) -> None:
        """--save persists the limiter that a later --load starts from."""
        code, _ = self._run("check", "1402/10/22", "--disabled", "1402/10/22", "--save")
        self.assertEqual(code, 0)
        self.assertTrue(Path(self.state_file_path).exists())

        _, output = self._run("check", "1402/10/22", "--load")
        self.assertEqual(output, "out of range")

        _, output = self._run("check", "1402/10/22")
        self.assertEqual(output, "in range")


if __name__ == "__main__":
    unittest.main()
