"""
Input validation utilities for the crypto thread bot.
Validates raw trending records and API responses.
"""

import math
from typing import Optional, List, Dict, Any


class InputValidator:
    """Validates raw inputs and data."""

    @staticmethod
    def coerce_percent_change(value: Any) -> Optional[float]:
        """
        Convert a raw percent-change value to float.

        Args:
            value: Raw value (number, numeric string, None, ...)

        Returns:
            float or None if the value is missing, non-numeric or not finite
        """
        if value is None or isinstance(value, bool):
            return None

        try:
            number = float(value)
        except (TypeError, ValueError):
            return None

        if not math.isfinite(number):
            return None
        return number

    @staticmethod
    def is_valid_record(record: Any) -> bool:
        """
        Check that a raw trending record has a usable name and symbol.

        Args:
            record: Raw record dictionary

        Returns:
            bool: True if the record can be turned into a snapshot
        """
        if not isinstance(record, dict):
            return False

        name = record.get("name")
        symbol = record.get("symbol")
        return bool(isinstance(name, str) and name.strip()) and bool(
            isinstance(symbol, str) and InputValidator.normalize_symbol(symbol)
        )

    @staticmethod
    def normalize_symbol(symbol: str) -> str:
        """
        Normalize a token symbol as reported by the data source.

        Surrounding whitespace and a leading cashtag "$" are removed; case is
        kept (display code uppercases).

        Args:
            symbol: Token symbol

        Returns:
            str: Normalized symbol
        """
        return str(symbol).strip().lstrip("$").strip()

    @staticmethod
    def validate_api_response(response: Dict[str, Any], required_fields: List[str]) -> bool:
        """
        Validate that API response contains required fields.

        Args:
            response: API response dictionary
            required_fields: List of required field names

        Returns:
            bool: True if all required fields are present
        """
        if not isinstance(response, dict):
            return False

        for field in required_fields:
            if field not in response:
                return False

        return True
