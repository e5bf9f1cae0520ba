"""Tests for configuration."""

import json
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from metardecode.config import AppConfig, DecoderConfig, LoggingConfig, WebUIConfig


class TestConfig(unittest.TestCase):
    """Test configuration models and persistence."""

    def test_defaults(self):
        """Test default configuration values."""
        config = AppConfig()
        self.assertEqual(config.decoder.default_message_type, "METAR")
        self.assertEqual(config.logging.level, "INFO")
        self.assertEqual(config.web_ui.port, 8080)

    def test_invalid_message_type(self):
        """Test only METAR and SPECI are accepted."""
        with self.assertRaises(ValidationError):
            DecoderConfig(default_message_type="TAF")

    def test_level_normalized(self):
        """Test the log level is uppercased."""
        self.assertEqual(LoggingConfig(level="debug").level, "DEBUG")
        with self.assertRaises(ValidationError):
            LoggingConfig(level="VERBOSE")

    def test_port_range(self):
        """Test ports outside 1024-65535 are rejected."""
        with self.assertRaises(ValidationError):
            WebUIConfig(port=80)

    def test_load_creates_default(self):
        """Test loading a missing file writes the defaults."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "sub" / "config.json"
            config = AppConfig.load(path)
            self.assertTrue(path.exists())
            self.assertEqual(config, AppConfig())

    def test_save_and_load(self):
        """Test a saved config loads back unchanged."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            config = AppConfig(decoder=DecoderConfig(default_message_type="SPECI"))
            config.save(path)

            with open(path, "r", encoding="utf-8") as f:
                self.assertEqual(json.load(f)["decoder"]["default_message_type"], "SPECI")

            loaded = AppConfig.load(path)
            self.assertEqual(loaded.decoder.default_message_type, "SPECI")


if __name__ == "__main__":
    unittest.main()
