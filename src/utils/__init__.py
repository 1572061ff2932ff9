"""
Utility modules for configuration, validation, and formatting.
"""

from src.utils.config import Config
from src.utils.validators import InputValidator
from src.utils.formatters import OutputFormatter
from src.utils.logging_config import setup_logging

__all__ = [
    "Config",
    "InputValidator",
    "OutputFormatter",
    "setup_logging",
]
