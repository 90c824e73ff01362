"""
Weighted sampling over ordered frequency distributions.
"""

import random
from typing import Hashable, Mapping, Optional, TypeVar

K = TypeVar("K", bound=Hashable)


class EmptyDistributionError(ValueError):
    """Raised when asked to sample from a distribution with no entries."""


def sample_weighted(distribution: Mapping[K, float], rng: Optional[random.Random] = None) -> K:
    """
    Draw one key with probability proportional to its weight.

    Entries are scanned in the mapping's own order against a single uniform
    draw, so results are reproducible for a seeded `rng`. A one-entry
    distribution is returned without consuming randomness.
    """
    if not distribution:
        raise EmptyDistributionError("Can't sample from an empty distribution")

    total = 0
    for key, weight in distribution.items():
        if weight < 0:
            raise ValueError(f"Negative weight for {key!r}: {weight}")
        total += weight

    if len(distribution) == 1:
        return key

    cutoff = (rng or random).random()

    cumulative = 0.0
    for key, weight in distribution.items():
        # an all-zero distribution never passes the cutoff
        if total:
            cumulative += weight / total
            if cumulative > cutoff:
                return key

    # rounding left the cumulative sum just under the cutoff
    return key
