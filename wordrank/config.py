"""
configuration constants for the wordrank engine.

all the magic numbers live here so they're easy to tweak.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path


@dataclass
class Config:
    """engine configuration, tweak these as needed."""

    # embedding dimensions (int8 quantized sentence-embedding vectors)
    embed_dim: int = 384

    # day index 0 starts here
    epoch: datetime = datetime(2026, 1, 15, tzinfo=timezone.utc)

    # how many days of full rankings to keep in memory
    ranking_cache_size: int = 2

    # LCG search bounds
    lcg_increment_limit: int = 100
    lcg_search_limit: int = 10_000
    lcg_max_candidates: int = 10

    # default length of the "top words" reveal list
    default_top_count: int = 100

    # paths (relative to project root by default)
    data_dir: Path = Path("data")

    # filenames inside data_dir
    words_file: str = "words.json"
    targets_file: str = "targets.json"
    vectors_file: str = "vectors.bin"

    def __post_init__(self):
        """ensure paths are Path objects."""
        self.data_dir = Path(self.data_dir)

    @property
    def words_path(self) -> Path:
        return self.data_dir / self.words_file

    @property
    def targets_path(self) -> Path:
        return self.data_dir / self.targets_file

    @property
    def vectors_path(self) -> Path:
        return self.data_dir / self.vectors_file


# default config instance
DEFAULT_CONFIG = Config()
