"""
Telegram message templates for the thread package.
"""

from typing import List, Union

from src.market.models import AssetSnapshot, RenderedAsset, RenderedChart
from src.market.summary import extract_summary
from src.utils.formatters import OutputFormatter

SEPARATOR = "━" * 38


def format_startup_message() -> str:
    return "🚀 Crypto automation started! Generating content with images and charts..."


def format_failure_message(error: Exception) -> str:
    return f"❌ Crypto automation failed: {error}"


def format_main_message(
    thread: str,
    snapshots: List[AssetSnapshot],
    image_count: int = 2,
    chart_count: int = 1,
) -> str:
    """
    Combine the drafted thread with a quick market summary.

    Args:
        thread: Thread text from the writer
        snapshots: Non-empty snapshot list
        image_count: Number of images that follow
        chart_count: Number of charts that follow

    Returns:
        str: Markdown message body
    """
    summary = extract_summary(snapshots)
    gainer, loser = summary.top_gainer, summary.top_loser
    fmt = OutputFormatter.format_percentage

    return f"""🧵 *Your Daily Crypto Twitter Thread is Ready!*

{thread}

{SEPARATOR}

📊 *Quick Market Summary:*
🚀 Top Gainer: {gainer.name} ({gainer.display_symbol}) {fmt(gainer.percent_change_24h)}
📉 Biggest Move: {loser.name} ({loser.display_symbol}) {fmt(loser.percent_change_24h)}

✨ *Package Includes:*
🧵 Complete 6-tweet thread ready to post
🎨 Custom crypto-themed images ({image_count})
📈 Live price change charts ({chart_count})

💡 *Tip:* Images and charts will be sent separately for easy download and posting!"""


def format_document_caption(artifact: Union[RenderedAsset, RenderedChart]) -> str:
    project = getattr(artifact, "project", None) or "Crypto"
    trend = getattr(artifact, "trend", None)
    trend_text = trend.value if trend is not None else "Market movement"
    return (
        f"🎨 *{artifact.description}*\n\n"
        f"📊 {project} Analysis\n"
        f"📈 Trend: {trend_text}\n\n"
        f"_Ready for your Twitter thread!_"
    )


def format_document_fallback(artifact: Union[RenderedAsset, RenderedChart]) -> str:
    return (
        f"🎨 *Generated Image:* {artifact.file_name}\n\n"
        f"{artifact.description}\n\n"
        f"📁 _Image saved locally and ready for download_\n"
        f"📊 _Use this for your Twitter thread visual content_"
    )
