"""Configuration dataclasses and result containers for search-time runs.

All frozen dataclasses that parameterise the domain, the batch of trials,
and the per-trial outcome live here. Validation happens in ``__post_init__``
so an invalid configuration never reaches the simulation loop.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from diffusion_search.config.constants import (
    BASE_SEED,
    DIMENSION,
    MAX_REJECTION_TRIES,
    MAX_STEP_FACTOR,
    MIN_PLACEMENT_ACCEPTANCE,
    PLACEMENT_TRIES_MARGIN,
    REPEAT_COUNT,
    SEARCHER_COUNT,
    SET_COUNT,
    SYSTEM_SIZE,
    TARGET_SIZE,
    TIME_SCALE,
)
from diffusion_search.errors import InvalidConfigurationError

__all__ = [
    "DomainConfig",
    "RunConfig",
    "TerminationReason",
    "TrialResult",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


class TerminationReason(Enum):
    """Why a trial stopped stepping."""

    ABSORBED = "absorbed"
    STEP_CAP = "step_cap"


@dataclass(frozen=True)
class TrialResult:
    """Outcome of one search trial."""

    set_index: int
    repeat_index: int
    seed: int
    search_time: float
    steps: int
    absorbed: bool
    termination_reason: str

    def to_row(self) -> dict[str, int | float | bool | str]:
        """Flatten into a column-name keyed row."""
        return {
            "set_index": self.set_index,
            "repeat_index": self.repeat_index,
            "seed": self.seed,
            "search_time": self.search_time,
            "steps": self.steps,
            "absorbed": self.absorbed,
            "termination_reason": self.termination_reason,
        }


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DomainConfig:
    """Geometry and time scale of the search domain.

    The searcher diffuses inside a sphere of radius ``system_size`` with a
    reflecting wall and is absorbed by a concentric sphere of radius
    ``target_size``.
    """

    system_size: float = SYSTEM_SIZE
    target_size: float = TARGET_SIZE
    dimension: int = DIMENSION
    time_scale: float = TIME_SCALE
    """Simulated time per step (mu0); the per-axis step variance is 2 * mu0."""
    max_step_factor: float = MAX_STEP_FACTOR
    """Gaussian deviates beyond max_step_factor * system_size are redrawn."""

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise InvalidConfigurationError("dimension must be >= 1")
        if not self.system_size > 0.0:
            raise InvalidConfigurationError("system_size must be > 0")
        if not self.target_size > 0.0:
            raise InvalidConfigurationError("target_size must be > 0")
        if self.target_size >= self.system_size:
            # Placement could never find a point between the two spheres.
            raise InvalidConfigurationError("target_size must be < system_size")
        if not self.time_scale > 0.0:
            raise InvalidConfigurationError("time_scale must be > 0")
        if not self.max_step_factor > 0.0:
            raise InvalidConfigurationError("max_step_factor must be > 0")
        if self.placement_acceptance < MIN_PLACEMENT_ACCEPTANCE:
            raise InvalidConfigurationError(
                f"placement acceptance {self.placement_acceptance:.3g} is below "
                f"{MIN_PLACEMENT_ACCEPTANCE:g}; reduce dimension or target_size / system_size"
            )

    @property
    def placement_acceptance(self) -> float:
        """Probability that a uniform point of the bounding cube lies in the search shell."""
        d = self.dimension
        ball_to_cube = math.exp(
            0.5 * d * math.log(math.pi) - math.lgamma(0.5 * d + 1.0) - d * math.log(2.0)
        )
        return ball_to_cube * (1.0 - (self.target_size / self.system_size) ** d)

    @property
    def min_placement_tries(self) -> int:
        """Placement budget large enough that a valid domain never exhausts it."""
        return math.ceil(PLACEMENT_TRIES_MARGIN / self.placement_acceptance)

    @property
    def max_step_magnitude(self) -> float:
        """Truncation bound for a single raw Gaussian component."""
        return self.max_step_factor * self.system_size

    @property
    def step_scale(self) -> float:
        """Factor turning a standard-normal deviate into a displacement."""
        return math.sqrt(2.0 * self.time_scale)


@dataclass(frozen=True)
class RunConfig:
    """Batch parameters: how many trials and how they are seeded."""

    searcher_count: int = SEARCHER_COUNT
    repeat_count: int = REPEAT_COUNT
    set_count: int = SET_COUNT
    base_seed: int = BASE_SEED
    max_steps: int | None = None
    """Per-trial step cap; None keeps the unbounded reference loop."""
    max_rejection_tries: int = MAX_REJECTION_TRIES

    def __post_init__(self) -> None:
        if self.searcher_count < 1:
            raise InvalidConfigurationError("searcher_count must be >= 1")
        if self.repeat_count < 1:
            raise InvalidConfigurationError("repeat_count must be >= 1")
        if self.set_count < 1:
            raise InvalidConfigurationError("set_count must be >= 1")
        if self.max_steps is not None and self.max_steps < 1:
            raise InvalidConfigurationError("max_steps must be >= 1 when set")
        if self.max_rejection_tries < 1:
            raise InvalidConfigurationError("max_rejection_tries must be >= 1")

    @property
    def total_trials(self) -> int:
        return self.set_count * self.repeat_count
