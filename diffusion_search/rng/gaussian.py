"""Standard-normal deviates via the Marsaglia polar (Box-Muller) method."""

from __future__ import annotations

import math
from collections.abc import Callable

from diffusion_search.config.constants import MAX_REJECTION_TRIES
from diffusion_search.errors import RejectionLimitError
from diffusion_search.rng.uniform import UniformEngine


def polar_pair(
    uniform: Callable[[], float], max_tries: int = MAX_REJECTION_TRIES
) -> tuple[float, float]:
    """Return two independent standard-normal deviates.

    Points ``(v1, v2)`` are drawn uniformly in the square ``(-1, 1)^2`` until
    one lands strictly inside the unit disk and away from the origin
    (``rsq == 0`` would make the logarithm diverge). The acceptance
    probability per try is pi/4.

    The first element is the deviate served immediately, the second the one
    to cache. Raises :exc:`RejectionLimitError` after ``max_tries`` rejected
    points, which only a degenerate uniform source can cause.
    """
    for _ in range(max_tries):
        v1 = 2.0 * uniform() - 1.0
        v2 = 2.0 * uniform() - 1.0
        rsq = v1 * v1 + v2 * v2
        if rsq >= 1.0 or rsq == 0.0:
            continue
        fac = math.sqrt(-2.0 * math.log(rsq) / rsq)
        return v2 * fac, v1 * fac
    raise RejectionLimitError("gaussian polar", max_tries)


class GaussianSampler:
    """Serve polar-method deviates one at a time, caching the pair's partner."""

    def __init__(self, engine: UniformEngine, max_tries: int = MAX_REJECTION_TRIES) -> None:
        self.engine = engine
        self.max_tries = max_tries
        self._has_cached = False
        self._cached = 0.0

    @property
    def has_cached(self) -> bool:
        return self._has_cached

    def reseed(self) -> None:
        """Drop any cached deviate; call alongside ``engine.reseed``."""
        self._has_cached = False
        self._cached = 0.0

    def draw(self) -> float:
        if self._has_cached:
            self._has_cached = False
            return self._cached
        value, self._cached = polar_pair(self.engine.draw, self.max_tries)
        self._has_cached = True
        return value

    def __call__(self) -> float:
        return self.draw()
