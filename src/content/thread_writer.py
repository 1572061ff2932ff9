"""
Thread drafting with a Groq-hosted language model.
Falls back to a template thread when the model call fails.
"""

from typing import List, Optional
import logging
from langchain_groq import ChatGroq
from langchain_core.messages import SystemMessage, HumanMessage

from src.market.models import AssetSnapshot
from src.market.summary import partition_movers
from src.utils.formatters import OutputFormatter

logger = logging.getLogger(__name__)


class ThreadWriter:
    """
    Drafts a 6-tweet thread about the trending assets.
    """

    SYSTEM_PROMPT = """You are a crypto market writer for Twitter/X.
You write engaging, informative threads for crypto enthusiasts.
Never give financial advice; encourage readers to do their own research."""

    THREAD_PROMPT = """Create a 6-tweet Twitter thread about these trending crypto projects: {data}

Make it engaging and informative. Include:
- Hook tweet with trending data
- Market analysis
- Key projects to watch
- Investment insights
- Strong conclusion with hashtags

Format as:
Tweet 1/6: [content]
Tweet 2/6: [content]
... etc

Keep each tweet under 240 characters and make them valuable for crypto enthusiasts."""

    def __init__(self, api_key: str, model: str = "llama-3.1-8b-instant", llm: Optional[ChatGroq] = None):
        """
        Initialize the writer.

        Args:
            api_key: Groq API key
            model: Groq model name
            llm: Pre-built chat model (mainly for tests)
        """
        self.model = model
        self.llm = llm or ChatGroq(
            model=model,
            temperature=0.7,
            max_tokens=1200,
            api_key=api_key,
        )
        logger.info(f"✅ ThreadWriter initialized with Groq AI (model: {model})")

    @staticmethod
    def describe_assets(snapshots: List[AssetSnapshot]) -> str:
        return ", ".join(
            f"{s.name} ({s.display_symbol}): {OutputFormatter.format_percentage(s.percent_change_24h)}"
            for s in snapshots
        )

    def build_prompt(self, snapshots: List[AssetSnapshot]) -> str:
        return self.THREAD_PROMPT.format(data=self.describe_assets(snapshots))

    def write(self, snapshots: List[AssetSnapshot]) -> str:
        """
        Draft the thread, or return the template thread if the model fails.

        Args:
            snapshots: Trending assets

        Returns:
            str: Thread text ("Tweet N/6: ..." lines)
        """
        logger.info("🧠 Generating AI-powered thread content...")
        try:
            response = self.llm.invoke([
                SystemMessage(content=self.SYSTEM_PROMPT),
                HumanMessage(content=self.build_prompt(snapshots)),
            ])
            text = (response.content or "").strip()
            if not text:
                raise ValueError("Model returned an empty thread")
            logger.info("✅ AI thread content generated successfully")
            return text
        except Exception as e:
            logger.warning(f"⚠️ AI generation failed, using template: {e}")
            return self.template_thread(snapshots)

    @staticmethod
    def template_thread(snapshots: List[AssetSnapshot]) -> str:
        """Deterministic thread built from the gainers / losers partition."""
        fmt = OutputFormatter.format_percentage
        gainers, losers = partition_movers(snapshots)
        gainer_text = ", ".join(f"${s.display_symbol} {fmt(s.percent_change_24h)}" for s in gainers) or "none today"
        loser_text = ", ".join(f"${s.display_symbol} {fmt(s.percent_change_24h)}" for s in losers) or "none today"
        first = snapshots[0].display_symbol if len(snapshots) > 0 else "BTC"
        third = snapshots[2].display_symbol if len(snapshots) > 2 else "ETH"

        return "\n\n".join([
            "Tweet 1/6: 🚀 Crypto markets are moving! Here's what's trending right now and what it means for your portfolio 👇 #crypto",
            f"Tweet 2/6: 📈 Top gainers: {gainer_text} - momentum building!",
            f"Tweet 3/6: 📉 Key projects facing pressure: {loser_text} - potential buying opportunities?",
            f"Tweet 4/6: 💡 Market insight: Mixed sentiment with selective strength in {first} and {third} showing resilience",
            "Tweet 5/6: ⚡ What to watch: Keep an eye on volume patterns and support levels. Always DYOR before making investment decisions!",
            "Tweet 6/6: 🎯 Follow for daily crypto insights and never miss market-moving developments. What's your take on today's trends? 👀 #bitcoin #ethereum #DeFi #trading",
        ])
