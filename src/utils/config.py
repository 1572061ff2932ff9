"""
Configuration management for the crypto thread bot.
Loads environment variables into an explicit configuration object that is
passed to every component that needs it.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Optional, List
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"⚠️  {name}={raw!r} is not an integer, using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    """Read a float environment variable, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"⚠️  {name}={raw!r} is not a number, using {default}")
        return default


@dataclass
class Config:
    """Settings for one bot run."""

    # Groq Configuration (thread drafting)
    groq_api_key: str = ""
    groq_model: str = "llama-3.1-8b-instant"

    # Telegram Configuration (delivery)
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""

    # Crypto Data API Keys
    coingecko_api_key: Optional[str] = None

    # Pipeline Settings
    trending_limit: int = 5
    image_count: int = 2
    send_delay_seconds: float = 2.0
    images_dir: str = field(default_factory=lambda: os.path.join(".", "generated-images"))
    charts_dir: str = field(default_factory=lambda: os.path.join(".", "generated-charts"))

    # Logging
    log_level: str = "INFO"
    log_file: str = "thread_bot.log"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Config":
        """
        Build a configuration from environment variables.

        Args:
            load_env_file: Whether to load a `.env` file first

        Returns:
            Config: Populated configuration
        """
        if load_env_file:
            load_dotenv()

        defaults = cls()
        return cls(
            groq_api_key=os.getenv("GROQ_API_KEY", ""),
            groq_model=os.getenv("GROQ_MODEL", defaults.groq_model),
            telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            telegram_chat_id=os.getenv("TELEGRAM_CHAT_ID", ""),
            coingecko_api_key=os.getenv("COINGECKO_API_KEY") or None,
            trending_limit=_env_int("TRENDING_LIMIT", defaults.trending_limit),
            image_count=_env_int("IMAGE_COUNT", defaults.image_count),
            send_delay_seconds=_env_float("SEND_DELAY_SECONDS", defaults.send_delay_seconds),
            images_dir=os.getenv("IMAGES_DIR", defaults.images_dir),
            charts_dir=os.getenv("CHARTS_DIR", defaults.charts_dir),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level),
            log_file=os.getenv("BOT_LOG_FILE", defaults.log_file),
        )

    def missing_keys(self, require_delivery: bool = True) -> List[str]:
        """
        List required settings that are not configured.

        Args:
            require_delivery: Whether Telegram and Groq credentials are required

        Returns:
            list: Names of missing environment variables
        """
        if not require_delivery:
            return []

        required_keys = [
            ("GROQ_API_KEY", self.groq_api_key),
            ("TELEGRAM_BOT_TOKEN", self.telegram_bot_token),
            ("TELEGRAM_CHAT_ID", self.telegram_chat_id),
        ]
        return [name for name, value in required_keys if not value]

    def validate(self, require_delivery: bool = True) -> bool:
        """
        Validate that required configuration is present.

        Returns:
            bool: True if configuration is valid, False otherwise
        """
        missing = self.missing_keys(require_delivery=require_delivery)
        if missing:
            logger.error(f"❌ Missing required environment variables: {', '.join(missing)}")
            logger.error("💡 Please create a .env file and add your API keys.")
            return False

        if self.trending_limit < 1:
            logger.error(f"❌ TRENDING_LIMIT must be at least 1 (got {self.trending_limit})")
            return False

        if self.image_count < 0:
            logger.error(f"❌ IMAGE_COUNT cannot be negative (got {self.image_count})")
            return False

        return True

    def print_status(self):
        """Print configuration status for debugging."""
        print("=" * 60)
        print("🔧 Configuration Status")
        print("=" * 60)
        print(f"GROQ Model: {self.groq_model}")
        print(f"GROQ API Key: {'✅ Set' if self.groq_api_key else '❌ Missing'}")
        print(f"Telegram Bot Token: {'✅ Set' if self.telegram_bot_token else '❌ Missing'}")
        print(f"Telegram Chat ID: {'✅ Set' if self.telegram_chat_id else '❌ Missing'}")
        print(f"CoinGecko: {'Pro API' if self.coingecko_api_key else 'Free API'}")
        print(f"\nTrending assets: {self.trending_limit}")
        print(f"Images per run: {self.image_count}")
        print(f"Send delay: {self.send_delay_seconds} seconds")
        print(f"Images dir: {self.images_dir}")
        print(f"Charts dir: {self.charts_dir}")
        print(f"Log Level: {self.log_level}")
        print(f"Log File: {self.log_file}")
        print("=" * 60)
