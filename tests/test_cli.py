"""
Tests for the command line entry point.
"""

from unittest.mock import Mock, patch
from interfaces.cli import run_cli
from main import parse_args
from src.bot import RunReport
from src.market import extract_summary
from src.utils.config import Config


def _report(snapshots):
    return RunReport(
        snapshots=snapshots,
        summary=extract_summary(snapshots),
        thread="Tweet 1/6: gm",
        images=[],
        charts=[],
        used_fallback_data=True,
    )


class TestRunCli:
    """Test exit codes."""

    def test_success(self, sample_snapshots):
        """Test a completed run exits 0 and closes the bot."""
        bot = Mock()
        bot.run.return_value = _report(sample_snapshots)

        with patch('interfaces.cli.create_bot', return_value=bot) as mock_create:
            code = run_cli(dry_run=True, image_count=3, config=Config(log_level="ERROR"))

        assert code == 0
        assert mock_create.call_args.args[0].image_count == 3
        assert mock_create.call_args.kwargs["dry_run"] is True
        bot.close.assert_called_once()

    def test_verbose_prints_health(self, sample_snapshots, capsys):
        """Test verbose runs report service reachability first."""
        bot = Mock()
        bot.run.return_value = _report(sample_snapshots)
        bot.check_connections.return_value = {"CoinGecko": True, "Telegram": False}

        with patch('interfaces.cli.create_bot', return_value=bot):
            code = run_cli(verbose=True, config=Config(log_level="ERROR"))

        output = capsys.readouterr().out
        assert code == 0
        assert "CoinGecko: ✓ reachable" in output
        assert "Telegram: ✗ unreachable" in output

    def test_quiet_run_skips_health(self, sample_snapshots):
        bot = Mock()
        bot.run.return_value = _report(sample_snapshots)

        with patch('interfaces.cli.create_bot', return_value=bot):
            run_cli(config=Config(log_level="ERROR"))

        bot.check_connections.assert_not_called()

    def test_failure(self):
        """Test a failed run exits 1."""
        bot = Mock()
        bot.run.side_effect = RuntimeError("boom")

        with patch('interfaces.cli.create_bot', return_value=bot):
            code = run_cli(config=Config(log_level="ERROR"))

        assert code == 1
        bot.close.assert_called_once()

    def test_interrupt(self):
        """Test Ctrl+C exits 130."""
        with patch('interfaces.cli.create_bot', side_effect=KeyboardInterrupt):
            assert run_cli(config=Config(log_level="ERROR")) == 130


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        args = parse_args([])

        assert not args.verbose
        assert not args.dry_run
        assert args.images is None

    def test_flags(self):
        args = parse_args(["-v", "--dry-run", "--images", "3"])

        assert args.verbose
        assert args.dry_run
        assert args.images == 3
