#!/usr/bin/env python3
"""build the active pool of future secret words using wordfreq.

usage:
    python scripts/build_pool.py
    python scripts/build_pool.py --min-zipf 3.5 --blocklist data/blacklist.txt

rewrites data/targets.json, keeping its history and replacing the pool:
  {
    "history": {"0": "...", ...},
    "pool": ["..."]
  }

words already in history never go back into the pool.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# add parent dir to path so we can import wordrank
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordrank.config import Config
from wordrank.embeddings import load_targets, load_vocab
from wordrank.errors import InitializationError
from wordrank.logging_config import configure_logging
from wordrank.wordfreq_utils import build_active_pool, load_blocklist


def main() -> None:
  parser = argparse.ArgumentParser(description="build the active secret pool")
  parser.add_argument("--data-dir", type=Path, default=Path("data"), help="data directory")
  parser.add_argument("--min-zipf", type=float, default=3.0, help="minimum zipf frequency")
  parser.add_argument("--limit", type=int, default=None, help="keep only the N most common words")
  parser.add_argument(
    "--blocklist",
    type=Path,
    default=Path("data/blacklist.txt"),
    help="newline-separated words that must never be secrets",
  )
  args = parser.parse_args()
  configure_logging()

  config = Config(data_dir=args.data_dir)
  try:
    vocab = load_vocab(config.words_path)
  except InitializationError as e:
    print(f"error: {e}")
    sys.exit(1)
  print(f"loaded vocab: {len(vocab):,} words")

  history: dict[int, str] = {}
  if config.targets_path.exists():
    history, old_pool = load_targets(config.targets_path)
    print(f"keeping {len(history):,} history days (old pool had {len(old_pool):,} words)")

  blocklist = load_blocklist(args.blocklist)
  if blocklist:
    print(f"loaded blocklist ({len(blocklist):,} entries)")

  print(f"scoring with wordfreq (en, min_zipf={args.min_zipf})...")
  scored = build_active_pool(vocab, history, min_zipf=args.min_zipf, blocklist=blocklist)
  if args.limit is not None:
    scored = scored[: args.limit]

  if scored:
    zs = [s.zipf for s in scored]
    print(f"  pool size: {len(scored):,}")
    print(f"  zipf range: {min(zs):.2f} – {max(zs):.2f}")
  else:
    print("  no candidates found (min_zipf too high?)")

  payload = {
    "history": {str(day): word for day, word in sorted(history.items())},
    "pool": [s.word for s in scored],
  }

  config.targets_path.parent.mkdir(parents=True, exist_ok=True)
  with open(config.targets_path, "w", encoding="utf-8") as f:
    json.dump(payload, f, ensure_ascii=False, indent=2)

  print(f"wrote {len(scored):,} pool words to {config.targets_path}")


if __name__ == "__main__":
  main()
