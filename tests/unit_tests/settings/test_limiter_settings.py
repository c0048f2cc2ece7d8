"""Tests for LimiterSettings and its settings sources."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

from persian_date_limiter.settings.limiter_settings import LimiterSettings
from persian_date_limiter.utils.pydantic_advanced_settings import JsonConfigSettingsSource


class TestLimiterSettings(unittest.TestCase):
    """Test cases for LimiterSettings."""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        patches = [
            patch("sys.argv", ["prog"]),
            patch.dict(os.environ, {}, clear=False),
            patch.object(
                JsonConfigSettingsSource,
                "json_file_path",
                Path(self.temp_dir.name) / "limiter_config.json",
            ),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)
        for key in list(os.environ):
            if key.upper().startswith("PERSIAN_LIMITER_"):
                del os.environ[key]

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def _settings(self, **kwargs) -> LimiterSettings:
        return LimiterSettings(_env_file=None, **kwargs)

    def test_defaults(self) -> None:
        settings = self._settings()
        self.assertEqual(settings.min_year, 1300)
        self.assertEqual(settings.max_year, 1500)
        self.assertIsNone(settings.time_zone)
        self.assertTrue(settings.state_file_path.endswith("limiter_state.json"))

    def test_environment_override(self) -> None:
        """Prefixed environment variables are read."""
        os.environ["PERSIAN_LIMITER_MIN_YEAR"] = "1390"
        os.environ["PERSIAN_LIMITER_TIME_ZONE"] = "Asia/Tehran"
        settings = self._settings()
        self.assertEqual(settings.min_year, 1390)
        self.assertEqual(settings.time_zone, "Asia/Tehran")

    def test_json_file_override(self) -> None:
        """limiter_config.json wins over the environment."""
        os.environ["PERSIAN_LIMITER_MAX_YEAR"] = "1450"
        JsonConfigSettingsSource.json_file_path.write_text(
            json.dumps({"max_year": 1420, "unrelated": True}),
            encoding="utf-8",
        )
        self.assertEqual(self._settings().max_year, 1420)

    def test_command_line_override(self) -> None:
        """--field options win over the JSON file."""
        JsonConfigSettingsSource.json_file_path.write_text(
            json.dumps({"max_year": 1420}),
            encoding="utf-8",
        )
        with patch("sys.argv", ["prog", "--max_year", "1410", "positional"]):
            self.assertEqual(self._settings().max_year, 1410)

    def test_init_arguments_win(self) -> None:
        with patch("sys.argv", ["prog", "--max_year", "1410"]):
            self.assertEqual(self._settings(max_year=1405).max_year, 1405)

    def test_inverted_year_range(self) -> None:
        with self.assertRaises(ValidationError):
            self._settings(min_year=1400, max_year=1399)

    def test_unknown_time_zone(self) -> None:
        with self.assertRaises(ValidationError):
            self._settings(time_zone="Mars/Olympus_Mons")

    def test_blank_time_zone_means_system_zone(self) -> None:
        self.assertIsNone(self._settings(time_zone="  ").time_zone)


if __name__ == "__main__":
    unittest.main()
