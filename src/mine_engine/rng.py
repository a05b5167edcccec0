"""
Random sources for mine placement.

Placement accepts any zero-argument callable returning floats in [0, 1).
Production code uses random.random; tests and replays use Mulberry32.
"""
from typing import Callable


RandomSource = Callable[[], float]

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


class Mulberry32:
    """
    Seeded 32-bit generator (Mulberry32).

    Produces the same sequence as the widely used JavaScript version for
    the same seed, so layouts can be replayed across implementations.
    """

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK

    def __call__(self) -> float:
        self._state = (self._state + _INCREMENT) & _MASK
        t = self._state
        r = ((t ^ (t >> 15)) * (1 | t)) & _MASK
        r ^= (r + (((r ^ (r >> 7)) * (61 | r)) & _MASK)) & _MASK
        return ((r ^ (r >> 14)) & _MASK) / 4294967296


def create_seeded_rng(seed: int) -> RandomSource:
    """Create a deterministic random source for the given seed."""
    return Mulberry32(seed)
