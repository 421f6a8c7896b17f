"""Geometry of the spherical search domain.

The domain is the shell between an absorbing target sphere and a reflecting
outer sphere, both centred at the origin.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from diffusion_search.config.constants import MAX_REJECTION_TRIES
from diffusion_search.errors import RejectionLimitError


def radius(position: Sequence[float]) -> float:
    """Euclidean distance of ``position`` from the origin."""
    total = 0.0
    for x in position:
        total += x * x
    return math.sqrt(total)


def reflect_outer(position: list[float], system_size: float, r: float) -> None:
    """Mirror ``position`` (at radius ``r > system_size``) across the outer sphere.

    Scales every coordinate in place so the new radius is
    ``2 * system_size - r``; the direction from the origin is unchanged.
    """
    scale = (2.0 * system_size - r) / r
    for j in range(len(position)):
        position[j] *= scale


def sample_annulus_point(
    uniform: Callable[[], float],
    dimension: int,
    system_size: float,
    target_size: float,
    max_tries: int = MAX_REJECTION_TRIES,
) -> list[float]:
    """Draw a point uniformly between the target and the outer sphere.

    Coordinates are drawn uniformly in ``[-system_size, system_size]`` and the
    whole vector is redrawn while it lies outside the outer sphere or inside
    the target. The acceptance rate is the shell-to-cube volume ratio, which
    shrinks quickly with dimension; raise ``max_tries`` for high dimensions.
    """
    for _ in range(max_tries):
        point = [system_size * (2.0 * uniform() - 1.0) for _ in range(dimension)]
        r = radius(point)
        if target_size <= r <= system_size:
            return point
    raise RejectionLimitError("placement", max_tries)
