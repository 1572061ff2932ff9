"""
Interface implementations for the bot (CLI).
"""

from interfaces.cli import run_cli

__all__ = [
    "run_cli",
]
