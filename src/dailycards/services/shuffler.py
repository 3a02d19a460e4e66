"""Reproducible card ordering keyed by profile and day."""
import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")

# Linear congruential generator constants
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


def seed_from_key(seed_key: str) -> int:
    """Sum of the UTF-16 code units of ``seed_key``."""
    encoded = seed_key.encode("utf-16-le")
    return sum(
        int.from_bytes(encoded[i:i + 2], "little")
        for i in range(0, len(encoded), 2)
    )


def deck_seed_key(profile_id: str, date: str) -> str:
    return f"{profile_id}-{date}"


def seeded_shuffle(items: Sequence[T], seed_key: str) -> List[T]:
    """Return a shuffled copy of ``items``; the same key always gives the same order.

    Fisher-Yates from the last index down to 1, driven by the LCG above.
    Not suitable for anything security related.
    """
    output = list(items)
    seed = seed_from_key(seed_key)
    for i in range(len(output) - 1, 0, -1):
        seed = (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        j = math.floor((seed / LCG_MODULUS) * (i + 1))
        output[i], output[j] = output[j], output[i]
    return output
