#!/usr/bin/env python3
"""
find the rank of a specific word for a given day.

usage:
    python scripts/find_word_rank.py --word ocean
    python scripts/find_word_rank.py --word ocean --day 3
"""

import argparse
import sys
from pathlib import Path

# add parent dir to path so we can import wordrank
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordrank import Config, GameService, InitializationError
from wordrank.logging_config import configure_logging


def main():
    parser = argparse.ArgumentParser(description="find word rank for a day")
    parser.add_argument("--word", type=str, required=True, help="word to find")
    parser.add_argument("--day", type=int, default=None, help="day index (default: today)")
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
    result = service.make_guess(args.word, day)

    if result.is_unknown:
        print(f"'{args.word}' not found in vocabulary")
        sys.exit(1)

    vocab_size = service.store.size()
    print(f"day: {day}")
    print(f"secret word: {service.get_target_word(day)}")
    print(f"search word: '{result.word}'")
    print(f"rank: {result.rank:,} (out of {vocab_size:,} words)")
    print(f"similarity: {result.similarity:.4f}")

    if vocab_size > 1:
        percentile = (1 - (result.rank - 1) / (vocab_size - 1)) * 100
        print(f"percentile: {percentile:.2f}%")


if __name__ == "__main__":
    main()
