"""
Output formatting utilities for the crypto thread bot.
Formats numbers, dates and text for renders and Telegram messages.

Percentages are rounded half-up on the shortest decimal representation of
the float, so 3.25 renders as "+3.3%" and 8.5 as "+9%".
"""

from typing import Any, Optional
from datetime import datetime
from decimal import Context, Decimal, ROUND_HALF_UP, InvalidOperation
import math


class OutputFormatter:
    """Formats output data for renders and messages."""

    @staticmethod
    def is_finite_number(value: Any) -> bool:
        """Check that value is a real, finite number (bools excluded)."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return math.isfinite(value)

    @staticmethod
    def round_half_up(value: float, decimals: int = 1) -> Decimal:
        """
        Round a number half-up to a fixed number of decimals.

        Args:
            value: Number to round
            decimals: Number of decimal places

        Returns:
            Decimal: Rounded value (negative zero collapses to zero)
        """
        zero = Decimal(0).scaleb(-decimals)
        try:
            exact = Decimal(repr(float(value)))
        except (InvalidOperation, ValueError, TypeError):
            return zero
        if not exact.is_finite():
            return zero

        # Precision must cover every integer digit plus the kept decimals
        context = Context(prec=max(exact.adjusted(), 0) + decimals + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=context)
        if rounded.is_zero():
            return abs(rounded)
        return rounded

    @staticmethod
    def format_percentage(value: Optional[float], decimals: int = 1) -> str:
        """
        Format percentage with a + sign for positive values.

        Args:
            value: Percentage value (None or NaN renders as zero)
            decimals: Number of decimal places

        Returns:
            str: Formatted percentage string (e.g., "+3.2%", "-1.8%", "0.0%")
        """
        if not OutputFormatter.is_finite_number(value):
            value = 0.0
        rounded = OutputFormatter.round_half_up(value, decimals)
        sign = "+" if rounded > 0 else ""
        return f"{sign}{rounded}%"

    @staticmethod
    def format_axis_percentage(magnitude: float, positive: bool = True) -> str:
        """
        Format a y-axis tick label rounded to whole percent.

        Args:
            magnitude: Absolute percentage
            positive: Whether this is the upper (+) or lower (-) tick

        Returns:
            str: Label such as "+9%" or "-9%"
        """
        rounded = OutputFormatter.round_half_up(abs(magnitude), 0)
        return f"{'+' if positive else '-'}{rounded}%"

    @staticmethod
    def format_timestamp(timestamp: Optional[datetime] = None) -> str:
        """
        Format timestamp for display.

        Args:
            timestamp: Datetime object (default: current time)

        Returns:
            str: Formatted timestamp string
        """
        if timestamp is None:
            timestamp = datetime.now()

        return timestamp.strftime("%Y-%m-%d %H:%M:%S")

    @staticmethod
    def format_chart_date(timestamp: datetime) -> str:
        """Format a local date as M/D/YYYY for chart subtitles."""
        return f"{timestamp.month}/{timestamp.day}/{timestamp.year}"

    @staticmethod
    def epoch_millis(timestamp: datetime) -> int:
        """Milliseconds since the epoch, used in artifact file names."""
        return int(timestamp.timestamp() * 1000)

    @staticmethod
    def truncate_text(text: str, max_chars: int = 10, suffix: str = "...") -> str:
        """
        Truncate text to a maximum number of characters, then add suffix.

        Args:
            text: Text to truncate
            max_chars: Characters kept before the suffix
            suffix: Suffix to add if truncated

        Returns:
            str: Truncated text
        """
        if len(text) <= max_chars:
            return text
        return text[:max_chars] + suffix

    @staticmethod
    def mask_identifier(value: str, visible: int = 3) -> str:
        """Show only the first characters of a chat id or token."""
        value = str(value or "")
        return f"{value[:visible]}..."
