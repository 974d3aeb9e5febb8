"""
arrays.py — Input Arrays
=========================
Where the numbers come from: random test arrays for the bar chart, and
parsing of arrays the user types in ("5, 3, 8, 1" or "5 3 8 1").
"""

import random
import re
from typing import List, Optional

import config


def random_array(
    size: int,
    low: int = config.MIN_VALUE,
    high: int = config.MAX_VALUE,
    seed: Optional[int] = None,
) -> List[int]:
    """`size` uniform ints in [low, high].  Same seed, same array."""
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


def clamp_size(size: int) -> int:
    return max(config.MIN_ARRAY_SIZE, min(config.MAX_ARRAY_SIZE, int(size)))


_SEPARATORS = re.compile(r"[,\s]+")


def parse_array(text: str) -> List[int]:
    """
    Parse comma- and/or whitespace-separated integers.

    Raises:
        ValueError: on an empty input or any token that is not an int.
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    if not tokens:
        raise ValueError("No values given")

    values = []
    for tok in tokens:
        try:
            values.append(int(tok))
        except ValueError:
            raise ValueError(f"Not an integer: {tok!r}") from None
    return values
