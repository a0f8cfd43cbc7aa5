"""Per-column style assignment."""

from __future__ import annotations

import random
import zlib
from typing import List, Optional, Sequence

from ..config.visual_config import COLUMN_STYLES, Style

_UNSEEDED = object()


class StyleAssigner:
    """Pick one style per column from a fixed palette.

    The palette is shuffled and cycled, so styles repeat only once every entry
    has been used. Without an explicit seed the shuffle is seeded from the
    column count and names, which keeps output identical across runs.
    """

    def __init__(self, palette: Sequence[Style] = COLUMN_STYLES, seed: Optional[int] = None):
        if not palette:
            raise ValueError("palette must not be empty")
        self.palette = tuple(palette)
        self.seed = seed

    @classmethod
    def unseeded(cls, palette: Sequence[Style] = COLUMN_STYLES) -> "StyleAssigner":
        """Assigner drawing from a fresh random source on every call."""
        assigner = cls(palette)
        assigner.seed = _UNSEEDED
        return assigner

    def assign(self, column_count: int, names: Optional[Sequence[str]] = None) -> List[Style]:
        if column_count < 0:
            raise ValueError(f"column_count must be >= 0, got {column_count}")

        rng = self._random_source(column_count, names)
        styles: List[Style] = []
        while len(styles) < column_count:
            cycle = list(self.palette)
            rng.shuffle(cycle)
            styles.extend(cycle[: column_count - len(styles)])
        return styles

    def _random_source(self, column_count: int, names: Optional[Sequence[str]]) -> random.Random:
        if self.seed is _UNSEEDED:
            return random.Random()
        if self.seed is not None:
            return random.Random(self.seed)
        return random.Random(derive_seed(column_count, names))


def derive_seed(column_count: int, names: Optional[Sequence[str]] = None) -> int:
    """Stable seed from the table shape (crc32, not salted like ``hash``)."""
    key = f"{column_count}\x1f" + "\x1f".join(names or ())
    return zlib.crc32(key.encode("utf-8"))
