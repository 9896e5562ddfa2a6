#!/usr/bin/env python3
"""
display top N words for a given day's secret word.

usage:
    python scripts/show_top_words.py
    python scripts/show_top_words.py --day 12 --top 50
"""

import argparse
import sys
from pathlib import Path

# add parent dir to path so we can import wordrank
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordrank import Config, GameService, InitializationError
from wordrank.logging_config import configure_logging


def main():
    parser = argparse.ArgumentParser(description="display top words for a day")
    parser.add_argument("--day", type=int, default=None, help="day index (default: today)")
    parser.add_argument("--top", type=int, default=50, help="number of top words to show")
    parser.add_argument("--data-dir", type=Path, default=Path("data"), help="data directory")
    parser.add_argument("--log-level", type=str, default=None, help="logging level")

    args = parser.parse_args()
    configure_logging(args.log_level)

    service = GameService(config=Config(data_dir=args.data_dir))
    try:
        service.initialize()
    except InitializationError as e:
        print(f"error: {e}")
        sys.exit(1)

    day = args.day if args.day is not None else service.current_day_index()
    secret = service.get_target_word(day)

    print(f"day: {day}")
    print(f"secret word: {secret}")
    print(f"vocab size: {service.store.size():,}")

    print(f"\ntop {args.top} words:")
    print("-" * 50)
    for entry in service.get_top_words(day, args.top):
        print(f"{entry.rank:5d}. {entry.word}")


if __name__ == "__main__":
    main()
