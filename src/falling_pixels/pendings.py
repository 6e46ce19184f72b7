"""Per-column reveal orders ("pendings").

Each grid column gets a random permutation of its row indices; the value at
row y is how many steps that cell waits once the column becomes active. All
columns are drawn from one PRNG stream, column 0 first, so a single seed
reproduces the full animation.
"""

from __future__ import annotations

import logging
from typing import List, MutableSequence, Optional, TypeVar

from falling_pixels.errors import PreconditionViolation
from falling_pixels.prng import Pcg32, check_seed

T = TypeVar("T")
Order = List[int]

log = logging.getLogger(__name__)


def shuffle(seq: MutableSequence[T], rng: Pcg32, exact_bounds: bool = True) -> None:
    """Fisher-Yates shuffle of seq in place, consuming rng.

    With exact_bounds=False the swap index is drawn the way the first version
    of the animation drew it (effectively from [0, i)), which is biased but
    keeps old seeds producing the same picture. That version also ran the
    loop down to index 0, spending one draw per element.
    """
    if exact_bounds:
        for i in range(len(seq) - 1, 0, -1):
            j = rng.randint(0, i)
            seq[i], seq[j] = seq[j], seq[i]
        return
    for i in range(len(seq) - 1, -1, -1):
        j = rng.gen_range(0, i)
        seq[i], seq[j] = seq[j], seq[i]


def generate_shuffled_sequence(n: int, rng: Pcg32, exact_bounds: bool = True) -> Order:
    if n < 0:
        raise ValueError(f"sequence length must be non-negative (got {n})")
    seq = list(range(n))
    shuffle(seq, rng, exact_bounds)
    return seq


class Pendings:
    def __init__(
        self,
        seed: int,
        count: int,
        size: int,
        rng: Optional[Pcg32] = None,
        *,
        exact_bounds: bool = True,
    ) -> None:
        if count < 0:
            raise ValueError(f"column count must be non-negative (got {count})")
        if size < 0:
            raise ValueError(f"order size must be non-negative (got {size})")
        self._rng = Pcg32() if rng is None else rng
        self._exact_bounds = exact_bounds
        self._seed = check_seed(seed)
        self._rng.seed(self._seed)
        self._orders = self._generate(count, size)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def orders(self) -> List[Order]:
        return self._orders

    @property
    def width(self) -> int:
        return len(self._orders)

    @property
    def height(self) -> int:
        return len(self._orders[0]) if self._orders else 0

    @property
    def rng(self) -> Pcg32:
        return self._rng

    @property
    def exact_bounds(self) -> bool:
        return self._exact_bounds

    def update_seed(self, new_seed: int) -> None:
        if not self._orders:
            raise PreconditionViolation("update_seed needs at least one existing column")
        check_seed(new_seed)
        count, size = len(self._orders), len(self._orders[0])
        self._seed = new_seed
        self._rng.seed(new_seed)
        # Swap in only once every column is built.
        self._orders = self._generate(count, size)

    def _generate(self, count: int, size: int) -> List[Order]:
        log.debug("generating %d orders of %d rows (seed=%d)", count, size, self._seed)
        return [generate_shuffled_sequence(size, self._rng, self._exact_bounds) for _ in range(count)]
