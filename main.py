"""
Main entry point for the Crypto Thread Bot.
Run this file (e.g. from a scheduler) to generate and deliver one thread package.

Usage:
    python main.py             # Fetch, draft, render and send to Telegram
    python main.py --verbose   # Same, with all logs in console
    python main.py --dry-run   # Render images and chart only, send nothing
"""

import sys
import os
import argparse

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from interfaces.cli import run_cli


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Crypto Thread Bot - trending crypto threads, images and charts for Telegram",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py              # Full run (requires GROQ_API_KEY, TELEGRAM_BOT_TOKEN, TELEGRAM_CHAT_ID)
  python main.py --dry-run    # Render only, no credentials needed
  python main.py --images 3   # Render three per-asset images
        """
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging (shows INFO/WARNING/ERROR in console, default: only WARNING)'
    )
    parser.add_argument(
        '-n', '--dry-run',
        action='store_true',
        help='Render images and chart without calling the model or Telegram'
    )
    parser.add_argument(
        '-i', '--images',
        type=int,
        default=None,
        help='Number of per-asset images to render (default: IMAGE_COUNT or 2)'
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    sys.exit(run_cli(verbose=args.verbose, dry_run=args.dry_run, image_count=args.images))
