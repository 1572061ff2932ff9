"""
Main Bot Class - Pipeline Orchestration
Runs fetch -> draft -> render -> deliver once per invocation.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from src.content import ThreadWriter, format_failure_message, format_main_message, format_startup_message
from src.data_sources import CoinGeckoClient
from src.delivery import TelegramClient
from src.market import (
    AssetSnapshot,
    MarketSnapshotBuilder,
    MarketSummary,
    RenderedAsset,
    RenderedChart,
    extract_summary,
    fallback_snapshots,
)
from src.rendering import AssetImageRenderer, PriceChartRenderer
from src.utils import Config, setup_logging

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """What one run produced."""

    snapshots: List[AssetSnapshot]
    summary: MarketSummary
    thread: str
    images: List[RenderedAsset]
    charts: List[RenderedChart]
    used_fallback_data: bool = False
    delivered: bool = False
    documents_uploaded: int = 0
    documents_as_text: int = 0


class ThreadBot:
    """
    Crypto thread bot - one linear run per invocation.
    """

    def __init__(
        self,
        config: Config,
        coingecko: Optional[CoinGeckoClient],
        telegram: Optional[TelegramClient],
        writer: Optional[ThreadWriter],
        image_renderer: AssetImageRenderer,
        chart_renderer: PriceChartRenderer,
        snapshot_builder: Optional[MarketSnapshotBuilder] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the bot with its collaborators.

        Args:
            config: Run configuration
            coingecko: Trending data client (None uses the fallback list)
            telegram: Delivery client (None skips delivery, e.g. dry runs)
            writer: Thread writer (None uses the template thread)
            image_renderer: Per-asset image renderer
            chart_renderer: Price change chart renderer
            snapshot_builder: Raw record normalizer
            sleep: Delay function between deliveries
        """
        self.config = config
        self.coingecko = coingecko
        self.telegram = telegram
        self.writer = writer
        self.image_renderer = image_renderer
        self.chart_renderer = chart_renderer
        self.snapshot_builder = snapshot_builder or MarketSnapshotBuilder()
        self.sleep = sleep

    def fetch_snapshots(self) -> Tuple[List[AssetSnapshot], bool]:
        """
        Fetch trending assets, falling back to the static list on any failure.

        Returns:
            tuple: (snapshots, used_fallback)
        """
        logger.info("📈 Fetching trending crypto data...")
        if self.coingecko is None:
            logger.info("ℹ️  No data source configured - using sample data")
            return fallback_snapshots(), True

        try:
            records = self.coingecko.get_trending_records(limit=self.config.trending_limit)
            snapshots = self.snapshot_builder.build(records, limit=self.config.trending_limit)
            if not snapshots:
                raise ValueError("No trending snapshots built")
            return snapshots, False
        except Exception as e:
            logger.warning(f"⚠️ API fetch failed, using sample data: {e}")
            return fallback_snapshots(), True

    def draft_thread(self, snapshots: List[AssetSnapshot]) -> str:
        if self.writer is None:
            return ThreadWriter.template_thread(snapshots)
        return self.writer.write(snapshots)

    def _deliver(self, report: RunReport):
        """Send the main message, then every image and chart."""
        logger.info("📤 Sending complete content package to Telegram...")
        self.telegram.send_message(format_main_message(
            report.thread,
            report.snapshots,
            image_count=len(report.images),
            chart_count=len(report.charts),
        ))

        documents = [*report.images, *report.charts]
        for position, artifact in enumerate(documents, start=1):
            logger.info(f"📸 Sending document {position}/{len(documents)}...")
            if self.telegram.send_document(artifact):
                report.documents_uploaded += 1
            else:
                report.documents_as_text += 1
            self.sleep(self.config.send_delay_seconds)

        report.delivered = True

    def run(self) -> RunReport:
        """
        Execute one full run.

        Returns:
            RunReport: Everything produced by the run

        Raises:
            Exception: Any fatal failure, after a best-effort failure notice
        """
        try:
            if self.telegram is not None:
                self.telegram.send_message(format_startup_message())

            snapshots, used_fallback = self.fetch_snapshots()
            summary = extract_summary(snapshots)

            thread = self.draft_thread(snapshots)

            logger.info("🎨 Generating crypto images...")
            images = self.image_renderer.render_batch(snapshots, count=self.config.image_count)

            logger.info("📊 Generating price charts...")
            charts = [self.chart_renderer.render(snapshots)]

            report = RunReport(
                snapshots=snapshots,
                summary=summary,
                thread=thread,
                images=images,
                charts=charts,
                used_fallback_data=used_fallback,
            )

            if self.telegram is not None:
                self._deliver(report)

            logger.info("✅ Automation completed successfully!")
            return report

        except Exception as e:
            logger.error(f"❌ Automation failed: {e}", exc_info=True)
            self._notify_failure(e)
            raise

    def _notify_failure(self, error: Exception):
        if self.telegram is None:
            return
        try:
            self.telegram.send_message(format_failure_message(error))
        except Exception as telegram_error:
            logger.error(f"❌ Could not send error to Telegram: {telegram_error}")

    def check_connections(self) -> Dict[str, bool]:
        """
        Ping each configured remote service.

        Returns:
            dict: Service name -> reachable
        """
        services = {"CoinGecko": self.coingecko, "Telegram": self.telegram}
        return {
            name: client.test_connection()
            for name, client in services.items()
            if client is not None
        }

    def close(self):
        for client in (self.coingecko, self.telegram):
            if client is not None:
                client.close()


def create_bot(config: Config, dry_run: bool = False) -> ThreadBot:
    """
    Factory function to create a bot wired from configuration.

    Args:
        config: Run configuration
        dry_run: Render only - skip the model call and Telegram delivery

    Returns:
        ThreadBot

    Raises:
        RuntimeError: If configuration is invalid or initialization fails
    """
    setup_logging(config)
    logger.info("🚀 Initializing crypto thread bot...")

    if not config.validate(require_delivery=not dry_run):
        raise RuntimeError("Configuration validation failed. Check your .env file.")

    try:
        coingecko = CoinGeckoClient(config.coingecko_api_key)
        telegram = None if dry_run else TelegramClient(config.telegram_bot_token, config.telegram_chat_id)
        writer = None if dry_run else ThreadWriter(config.groq_api_key, model=config.groq_model)
        bot = ThreadBot(
            config=config,
            coingecko=coingecko,
            telegram=telegram,
            writer=writer,
            image_renderer=AssetImageRenderer(config.images_dir),
            chart_renderer=PriceChartRenderer(config.charts_dir),
        )
    except Exception as e:
        logger.error(f"Failed to create bot: {e}", exc_info=True)
        raise RuntimeError(f"Bot initialization failed: {e}")

    logger.info("✅ Crypto thread bot initialized successfully")
    return bot
