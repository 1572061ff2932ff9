"""
Thread drafting and Telegram message templates.
"""

from src.content.thread_writer import ThreadWriter
from src.content.messages import (
    format_main_message,
    format_startup_message,
    format_failure_message,
    format_document_caption,
    format_document_fallback,
)

__all__ = [
    "ThreadWriter",
    "format_main_message",
    "format_startup_message",
    "format_failure_message",
    "format_document_caption",
    "format_document_fallback",
]
