"""
Logging setup for bot runs.
One file handler per process (path and level from Config); the CLI adds a
rich console handler on top.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.logging import RichHandler

from src.utils.config import Config

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_file_handler: Optional[logging.FileHandler] = None
_console_handler: Optional[RichHandler] = None


def setup_logging(
    config: Optional[Config] = None,
    *,
    verbose: bool = False,
    enable_console: bool = False,
) -> Optional[logging.Handler]:
    """
    Attach the run's log handlers to the root logger.

    The file handler is created on the first call only; later calls can
    still add or retune the console handler.

    Args:
        config: Supplies `log_file` and `log_level` (defaults to Config())
        verbose: Console shows INFO when True, otherwise WARNING and above
        enable_console: Attach a console handler (the CLI does, tests don't)

    Returns:
        The file handler, so callers can flush it before exiting
    """
    global _file_handler, _console_handler

    config = config or Config()
    root_logger = logging.getLogger()

    if _file_handler is None:
        level = logging.getLevelName(str(config.log_level).upper())
        if not isinstance(level, int):
            level = logging.INFO
        root_logger.setLevel(level)

        _file_handler = logging.FileHandler(config.log_file, encoding="utf-8", mode="a")
        _file_handler.setLevel(level)
        _file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(_file_handler)

    if enable_console:
        if _console_handler is None:
            _console_handler = RichHandler(show_path=False, markup=False, rich_tracebacks=False)
            root_logger.addHandler(_console_handler)
        _console_handler.setLevel(logging.INFO if verbose else logging.WARNING)

    return _file_handler
