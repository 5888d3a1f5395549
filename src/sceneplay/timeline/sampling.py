"""Seeded highlight samples.

Some scenes progressively highlight a random subset of a grid (e.g. "employees
randomly selected"). The subset must be reproducible so that scrubbing to the
same progress shows the same cells: a single permutation is drawn per
(seed, scene, sample) and the visible subset is always a prefix of it.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Tuple
import math
import zlib

import numpy as np


@dataclass(frozen=True)
class SampleSpec:
    """A progressively revealed random subset.

    Attributes:
        name: Key under which the selected indices are reported
        population: Number of cells to choose from
        count: Size of the fully revealed subset
        driver: Name of the phase whose ratio controls how much is shown
    """

    name: str
    population: int
    count: int
    driver: str


def derive_seed(seed: int, key: str) -> int:
    """Combine a session seed with a stable per-sample key."""
    return int(np.random.SeedSequence([seed & 0xFFFFFFFF, zlib.crc32(key.encode("utf-8"))])
               .generate_state(1)[0])


@lru_cache(maxsize=256)
def _permutation(seed: int, key: str, population: int) -> Tuple[int, ...]:
    rng = np.random.default_rng(derive_seed(seed, key))
    return tuple(int(i) for i in rng.permutation(population))


def sample_indices(
    seed: int,
    key: str,
    population: int,
    count: int,
    fraction: float = 1.0,
) -> FrozenSet[int]:
    """Pick ``floor(fraction * count)`` indices out of ``range(population)``.

    Args:
        seed: Session seed
        key: Stable identifier of the sample (scene and sample name)
        population: Number of candidate indices
        count: Subset size at ``fraction == 1``
        fraction: Portion of the subset to reveal, clamped to [0, 1]

    Returns:
        Frozen set of selected indices; always a prefix of the same
        permutation, so a larger fraction never drops an index.
    """
    if population <= 0 or count <= 0:
        return frozenset()
    fraction = max(0.0, min(1.0, fraction))
    take = min(count, population, int(math.floor(fraction * count)))
    return frozenset(_permutation(seed, key, population)[:take])
