"""Seedable PCG32 stream shared by the reveal order generator.

Same seeding procedure and output function as the generator the animation
was first written against, so one seed always yields one animation.
"""

from __future__ import annotations

from dataclasses import dataclass

U32_MASK = 0xFFFFFFFF
U64_MASK = 0xFFFFFFFFFFFFFFFF

MULTIPLIER = 6364136223846793005
DEFAULT_INC = 1442695040888963407


def check_seed(value: int) -> int:
    if not 0 <= value <= U64_MASK:
        raise ValueError(f"seed must be an unsigned 64-bit integer (got {value})")
    return value


@dataclass
class Pcg32:
    state: int = 0

    def seed(self, value: int) -> None:
        check_seed(value)
        self.state = 0
        self.next_u32()
        self.state = (self.state + value) & U64_MASK
        self.next_u32()

    def next_u32(self) -> int:
        old = self.state
        self.state = (old * MULTIPLIER + DEFAULT_INC) & U64_MASK
        xorshifted = (((old >> 18) ^ old) >> 27) & U32_MASK
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & U32_MASK

    def next_u64(self) -> int:
        hi = self.next_u32()
        lo = self.next_u32()
        return (hi << 32) | lo

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        span = high - low + 1
        if span > U32_MASK + 1:
            raise ValueError(f"range [{low}, {high}] wider than 32 bits")
        # Reject the tail that would make some residues more likely.
        limit = (U32_MASK + 1) - ((U32_MASK + 1) % span)
        while True:
            r = self.next_u32()
            if r < limit:
                return low + r % span

    def gen_range(self, low: int, high: int) -> int:
        """Float-scaled draw in [low, high); reaches high only on an all-ones draw."""
        r = self.next_u32() / U32_MASK
        # Float rounding can overshoot high on 64-bit ranges; saturate like an int cast.
        return min(int(low + (high - low) * r), high)
