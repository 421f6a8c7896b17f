"""Truncated Gaussian steps for the diffusion walk.

An unbounded Gaussian occasionally yields a component larger than the whole
domain, which the single-mirror reflection cannot handle. Components whose
magnitude exceeds the bound are redrawn. The resulting distribution is the
normal density cut at the bound without renormalisation, i.e. a biased
truncation rather than an exact truncated-normal sampler; with the default
bound (ten system radii) the cut is never reached in practice.
"""

from __future__ import annotations

from collections.abc import Callable

from diffusion_search.config.constants import MAX_REJECTION_TRIES
from diffusion_search.errors import RejectionLimitError
from diffusion_search.rng.gaussian import GaussianSampler


def bounded_deviate(
    gaussian: Callable[[], float], bound: float, max_tries: int = MAX_REJECTION_TRIES
) -> float:
    """Redraw from ``gaussian`` until ``abs(x) <= bound``."""
    for _ in range(max_tries):
        x = gaussian()
        if abs(x) <= bound:
            return x
    raise RejectionLimitError("bounded step", max_tries)


class BoundedStepSampler:
    """Per-axis bounded deviates scaled into one displacement vector."""

    def __init__(
        self,
        gaussian: GaussianSampler,
        max_step_magnitude: float,
        max_tries: int = MAX_REJECTION_TRIES,
    ) -> None:
        if not max_step_magnitude > 0.0:
            raise ValueError("max_step_magnitude must be > 0")
        self.gaussian = gaussian
        self.max_step_magnitude = max_step_magnitude
        self.max_tries = max_tries

    def draw_bounded_step(self) -> float:
        """Return one raw (unscaled) standard-normal component within the bound."""
        return bounded_deviate(self.gaussian.draw, self.max_step_magnitude, self.max_tries)

    def draw_displacement(self, dimension: int, step_scale: float) -> list[float]:
        """Return ``dimension`` bounded components, each multiplied by ``step_scale``."""
        return [self.draw_bounded_step() * step_scale for _ in range(dimension)]
