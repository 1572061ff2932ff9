"""
Crypto Thread Bot - Main Package
"""

from src.bot import ThreadBot, RunReport, create_bot

__version__ = "1.0.0"

__all__ = [
    "ThreadBot",
    "RunReport",
    "create_bot",
]
