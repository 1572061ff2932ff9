"""
Delivery channels for generated content.
"""

from src.delivery.telegram_client import TelegramClient

__all__ = [
    "TelegramClient",
]
