"""Tests for configuration management."""

import os
import unittest
from pathlib import Path
from unittest.mock import patch

from postchunks.config import Config, get_config, reset_config, set_config
from postchunks.exceptions import ConfigurationError


class TestConfig(unittest.TestCase):
    """Test cases for Config dataclass."""

    def test_default_values(self):
        config = Config()

        self.assertEqual(config.separator, "<!--more-->")
        self.assertEqual(config.transform, "render")
        self.assertEqual(config.outputs_dir, Path("outputs"))
        self.assertEqual(config.log_level, "INFO")
        self.assertIsNone(config.log_file)

    def test_from_env_with_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()

            self.assertEqual(config, Config())

    def test_from_env_with_custom_values(self):
        env_vars = {
            "POSTCHUNKS_SEPARATOR": "<!--nextpage-->",
            "POSTCHUNKS_TRANSFORM": "the_content",
            "POSTCHUNKS_OUTPUTS_DIR": "/custom/outputs",
            "POSTCHUNKS_LOG_LEVEL": "DEBUG",
            "POSTCHUNKS_LOG_FILE": "/var/log/postchunks.log",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            config = Config.from_env()

            self.assertEqual(config.separator, "<!--nextpage-->")
            self.assertEqual(config.transform, "the_content")
            self.assertEqual(config.outputs_dir, Path("/custom/outputs"))
            self.assertEqual(config.log_level, "DEBUG")
            self.assertEqual(config.log_file, Path("/var/log/postchunks.log"))

    def test_from_env_empty_log_file_means_none(self):
        with patch.dict(os.environ, {"POSTCHUNKS_LOG_FILE": ""}, clear=True):
            self.assertIsNone(Config.from_env().log_file)

    def test_validate_success(self):
        Config().validate()
        Config(log_level="debug").validate()

    def test_validate_empty_separator(self):
        with self.assertRaises(ConfigurationError) as context:
            Config(separator="").validate()

        self.assertIn("separator", str(context.exception))

    def test_validate_transform_type(self):
        with self.assertRaises(ConfigurationError):
            Config(transform=None).validate()

    def test_validate_invalid_log_level(self):
        with self.assertRaises(ConfigurationError) as context:
            Config(log_level="INVALID").validate()

        self.assertIn("Invalid log_level: INVALID", str(context.exception))

    def test_chunks_output_path(self):
        config = Config(outputs_dir=Path("out"))
        self.assertEqual(config.chunks_output_path(), Path("out/chunks/postchunks.json"))


class TestGlobalConfig(unittest.TestCase):
    """Test cases for global configuration functions."""

    def setUp(self):
        reset_config()

    def tearDown(self):
        reset_config()

    def test_get_config_singleton(self):
        with patch.dict(os.environ, {}, clear=True):
            config1 = get_config()
            config2 = get_config()

            self.assertIs(config1, config2)

    def test_get_config_reads_environment(self):
        with patch.dict(os.environ, {"POSTCHUNKS_SEPARATOR": "|"}, clear=True):
            self.assertEqual(get_config().separator, "|")

    def test_get_config_rejects_invalid_environment(self):
        with patch.dict(os.environ, {"POSTCHUNKS_SEPARATOR": ""}, clear=True):
            with self.assertRaises(ConfigurationError):
                get_config()
            with self.assertRaises(ConfigurationError):
                get_config()

    def test_set_config(self):
        custom_config = Config(separator="##")
        set_config(custom_config)

        self.assertIs(get_config(), custom_config)

    def test_set_config_validates(self):
        with self.assertRaises(ConfigurationError):
            set_config(Config(separator=""))

    def test_reset_config(self):
        set_config(Config(separator="##"))
        reset_config()

        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_config().separator, "<!--more-->")


if __name__ == "__main__":
    unittest.main()
