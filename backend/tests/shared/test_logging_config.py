"""Tests for shared/logging_config.py."""

import logging
from unittest.mock import patch

from shared.logging_config import LOG_FORMAT, configure_logging


class TestConfigureLogging:
    def test_level_and_format(self):
        with patch("shared.logging_config.logging.basicConfig") as basic_config:
            configure_logging("debug")

        basic_config.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT)

    def test_unknown_level_falls_back_to_info(self):
        with patch("shared.logging_config.logging.basicConfig") as basic_config:
            configure_logging("chatty")

        assert basic_config.call_args[1]["level"] == logging.INFO

    def test_quiets_httpx(self):
        with patch("shared.logging_config.logging.basicConfig"):
            configure_logging()

        assert logging.getLogger("httpx").level == logging.WARNING
