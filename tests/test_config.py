"""
Tests for environment configuration.
"""

from src.utils.config import Config


class TestConfig:
    """Test loading and validation."""

    def test_from_env(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:ABC")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "42")
        monkeypatch.setenv("IMAGE_COUNT", "3")
        monkeypatch.setenv("SEND_DELAY_SECONDS", "0.5")
        monkeypatch.delenv("COINGECKO_API_KEY", raising=False)

        config = Config.from_env(load_env_file=False)

        assert config.groq_api_key == "gsk-test"
        assert config.telegram_chat_id == "42"
        assert config.image_count == 3
        assert config.send_delay_seconds == 0.5
        assert config.coingecko_api_key is None
        assert config.validate()

    def test_bad_numbers_use_defaults(self, monkeypatch):
        """Test unparsable numbers fall back to defaults."""
        monkeypatch.setenv("TRENDING_LIMIT", "five")
        monkeypatch.setenv("SEND_DELAY_SECONDS", "soon")

        config = Config.from_env(load_env_file=False)

        assert config.trending_limit == 5
        assert config.send_delay_seconds == 2.0

    def test_missing_keys(self):
        """Test delivery credentials are required unless disabled."""
        config = Config(groq_api_key="gsk-test")

        assert config.missing_keys() == ["TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID"]
        assert not config.validate()
        assert config.missing_keys(require_delivery=False) == []
        assert config.validate(require_delivery=False)

    def test_invalid_counts(self):
        """Test range checks on pipeline settings."""
        assert not Config(trending_limit=0).validate(require_delivery=False)
        assert not Config(image_count=-1).validate(require_delivery=False)
