"""Combined multiplicative congruential generator with a Bays-Durham shuffle.

Two Schrage-evaluated congruential sequences (moduli ``IM1`` and ``IM2``) are
combined by subtraction and the output order is decorrelated through a
32-slot shuffle table. The output is rounded to single precision and clamped
to ``RNMX`` so that draws never reach 0 or 1.

Every draw is reproducible bit-for-bit from the seed and the draw count.
"""

from __future__ import annotations

import numpy as np

from diffusion_search.config.constants import (
    AM,
    IA1,
    IA2,
    IM1,
    IM2,
    IMM1,
    IQ1,
    IQ2,
    IR1,
    IR2,
    NDIV,
    NTAB,
    RNMX,
    WARMUP_DRAWS,
)


def _schrage_step(value: int, a: int, m: int, q: int, r: int) -> int:
    """Compute ``a * value mod m`` without overflowing a 32-bit product."""
    k = value // q
    value = a * (value - k * q) - k * r
    if value < 0:
        value += m
    return value


class UniformEngine:
    """Uniform deviates in (0, 1) from an explicitly seeded, owned state.

    Each instance owns its seeds and shuffle table; two engines never share
    state, so independent trials must each use their own instance.
    """

    def __init__(self, seed: int) -> None:
        self._seed = 0
        self._seed2 = 0
        self._iy = 0
        self._table = [0] * NTAB
        self.reseed(seed)

    @property
    def seed(self) -> int:
        """Current state of the primary sequence."""
        return self._seed

    @property
    def table(self) -> tuple[int, ...]:
        """Snapshot of the shuffle table."""
        return tuple(self._table)

    def reseed(self, seed: int) -> None:
        """Reset all state from ``seed`` and refill the shuffle table.

        Negative seeds use their magnitude and the result is reduced modulo
        ``IM1``; a residue of zero maps to 1, so every integer is a valid seed.
        The secondary sequence starts from the same value reduced into
        ``[1, IM2 - 1]``.
        """
        value = abs(seed) % IM1 or 1
        self._seed2 = value % IM2 or 1
        for j in range(WARMUP_DRAWS - 1, -1, -1):
            value = _schrage_step(value, IA1, IM1, IQ1, IR1)
            if j < NTAB:
                self._table[j] = value
        self._seed = value
        self._iy = self._table[0]

    def draw(self) -> float:
        """Return the next uniform deviate in ``(0, RNMX]``."""
        self._seed = _schrage_step(self._seed, IA1, IM1, IQ1, IR1)
        self._seed2 = _schrage_step(self._seed2, IA2, IM2, IQ2, IR2)
        j = self._iy // NDIV
        self._iy = self._table[j] - self._seed2
        self._table[j] = self._seed
        if self._iy < 1:
            self._iy += IMM1
        temp = float(np.float32(AM * self._iy))
        if temp > RNMX:
            return RNMX
        return temp

    def __call__(self) -> float:
        return self.draw()
