"""
Tests for logging setup.
"""

import logging
from rich.logging import RichHandler
from src.utils.config import Config
from src.utils.logging_config import setup_logging


class TestSetupLogging:
    """Test handler installation."""

    def test_file_handler_is_created_once(self, tmp_path):
        """Test repeated calls reuse the first file handler."""
        first = setup_logging(Config(log_level="ERROR"))
        second = setup_logging(Config(log_file=str(tmp_path / "other.log")))

        assert first is second
        assert isinstance(first, logging.FileHandler)
        assert not (tmp_path / "other.log").exists()
        assert logging.getLogger().handlers.count(first) == 1

    def test_console_handler_follows_verbosity(self):
        """Test the console handler is added once and retuned per call."""
        setup_logging(enable_console=True, verbose=True)
        consoles = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(consoles) == 1
        assert consoles[0].level == logging.INFO

        setup_logging(enable_console=True, verbose=False)
        consoles = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(consoles) == 1
        assert consoles[0].level == logging.WARNING
