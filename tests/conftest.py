"""
Pytest configuration and shared fixtures.
"""

import pytest
import os
import sys
import tempfile
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set test environment variables
os.environ.setdefault('LOG_LEVEL', 'ERROR')  # Reduce noise in tests

from src.market.models import AssetSnapshot
from src.market.snapshot_builder import fallback_snapshots
from src.utils.config import Config
from src.utils.logging_config import setup_logging

# Route all test-run logging to a temp file before any component configures it
setup_logging(Config(log_level="ERROR", log_file=os.path.join(tempfile.gettempdir(), "thread_bot_test.log")))

FROZEN_NOW = datetime(2026, 10, 16, 12, 30, 0)


@pytest.fixture
def frozen_clock():
    """Clock that always returns the same moment."""
    return lambda: FROZEN_NOW


@pytest.fixture
def sample_snapshots():
    """The five fallback assets: BTC 3.2, ETH -1.8, SOL 8.5, ADA 4.1, AVAX -2.3."""
    return fallback_snapshots()


@pytest.fixture
def make_snapshot():
    """Factory for single snapshots."""
    def _make(symbol: str, change: float, name: str = None, rank: int = 1) -> AssetSnapshot:
        return AssetSnapshot(name=name or symbol.title(), symbol=symbol, rank=rank, percent_change_24h=change)
    return _make
