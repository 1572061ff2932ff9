"""
Telegram Bot API client for delivering threads, images and charts.
Documentation: https://core.telegram.org/bots/api
"""

from pathlib import Path
from typing import Dict, Any, Union
import logging

from src.data_sources.base_client import BaseAPIClient, APIError
from src.market.models import RenderedAsset, RenderedChart
from src.content.messages import format_document_caption, format_document_fallback
from src.utils.formatters import OutputFormatter

logger = logging.getLogger(__name__)

Artifact = Union[RenderedAsset, RenderedChart]


class TelegramClient(BaseAPIClient):
    """Client for the Telegram Bot API."""

    def __init__(self, token: str, chat_id: str, timeout: int = 30):
        """
        Initialize Telegram client.

        Args:
            token: Bot token from BotFather
            chat_id: Target chat id
            timeout: Request timeout in seconds (uploads can be slow)
        """
        if not token or not chat_id:
            raise ValueError("Telegram bot token and chat id are required")

        super().__init__(api_key=token, base_url=f"https://api.telegram.org/bot{token}/", timeout=timeout)
        self.chat_id = str(chat_id)

    def _redact(self, text: str) -> str:
        """Hide the bot token that Telegram embeds in the URL path."""
        return text.replace(self.api_key, "***")

    def send_message(self, text: str, parse_mode: str = "Markdown") -> Dict[str, Any]:
        """
        Send a text message to the configured chat.

        Args:
            text: Message body
            parse_mode: Telegram parse mode

        Returns:
            dict: Telegram response

        Raises:
            APIError: If Telegram rejects the message
        """
        logger.info(f"📱 Sending to Telegram chat: {OutputFormatter.mask_identifier(self.chat_id)}")
        payload = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": parse_mode,
            "disable_web_page_preview": True,
        }
        result = self._make_request("sendMessage", params=payload, method="POST")
        if not result.get("ok", False):
            raise APIError(f"Telegram sendMessage failed: {result.get('description', 'unknown error')}")

        logger.info("✅ Message sent successfully!")
        return result

    def send_document(self, artifact: Artifact) -> bool:
        """
        Upload a rendered SVG as a document, falling back to a text message.

        Args:
            artifact: Rendered image or chart

        Returns:
            bool: True if the document was uploaded, False if the text
                  fallback was sent instead

        Raises:
            APIError: If the text fallback also fails
        """
        logger.info(f"🖼️ Sending document: {artifact.file_name}")

        try:
            content = artifact.content or Path(artifact.file_path).read_text(encoding="utf-8")
            result = self._make_request(
                "sendDocument",
                method="POST",
                data={
                    "chat_id": self.chat_id,
                    "caption": format_document_caption(artifact),
                    "parse_mode": "Markdown",
                },
                files={
                    "document": (artifact.file_name, content.encode("utf-8"), "image/svg+xml"),
                },
            )
            if not result.get("ok", False):
                raise APIError(f"Telegram sendDocument failed: {result.get('description', 'unknown error')}")
        except (APIError, OSError) as e:
            logger.warning(f"⚠️ Could not send as document, sending description instead: {str(e)[:100]}")
            self.send_message(format_document_fallback(artifact))
            return False

        logger.info("✅ Document sent successfully!")
        return True

    def test_connection(self) -> bool:
        """
        Test the bot token with getMe.

        Returns:
            bool: True if the token is valid
        """
        try:
            response = self._make_request("getMe")
            return bool(response.get("ok"))
        except Exception as e:
            logger.error(f"Telegram connection test failed: {e}")
            return False
