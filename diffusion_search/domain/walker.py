"""Single diffusing searcher with reflecting outer wall and absorbing target.

State machine: ``place()`` puts the walker in ``ACTIVE``. Each ``step()``
advances the simulated clock by ``time_scale``, adds a bounded Gaussian
displacement, then checks the boundaries: beyond the outer sphere the walker
is mirrored back inside, inside the target it becomes ``ABSORBED``.
``ABSORBED`` is terminal; further steps do nothing.
"""

from __future__ import annotations

from enum import Enum

from diffusion_search.config.constants import MAX_REJECTION_TRIES
from diffusion_search.config.types import DomainConfig
from diffusion_search.domain.boundary import radius, reflect_outer, sample_annulus_point
from diffusion_search.rng.bounded import BoundedStepSampler
from diffusion_search.rng.uniform import UniformEngine


class WalkerState(Enum):
    """Whether the walker is still searching."""

    ACTIVE = "active"
    ABSORBED = "absorbed"


class Walker:
    """Position, absorption flag and simulated clock of one searcher."""

    def __init__(
        self,
        domain: DomainConfig,
        engine: UniformEngine,
        step_sampler: BoundedStepSampler,
        max_placement_tries: int | None = None,
    ) -> None:
        self.domain = domain
        self.engine = engine
        self.step_sampler = step_sampler
        if max_placement_tries is None:
            max_placement_tries = max(MAX_REJECTION_TRIES, domain.min_placement_tries)
        self.max_placement_tries = max_placement_tries
        self._step_scale = domain.step_scale
        self.position: list[float] = [0.0] * domain.dimension
        self.absorbed = False
        self.elapsed_time = 0.0
        self.steps = 0

    @property
    def state(self) -> WalkerState:
        return WalkerState.ABSORBED if self.absorbed else WalkerState.ACTIVE

    def place(self) -> None:
        """Reset the clock and draw a uniform start point in the search shell."""
        self.position = sample_annulus_point(
            self.engine.draw,
            self.domain.dimension,
            self.domain.system_size,
            self.domain.target_size,
            self.max_placement_tries,
        )
        self.absorbed = False
        self.elapsed_time = 0.0
        self.steps = 0

    def step(self) -> WalkerState:
        """Advance one time step; no-op once absorbed."""
        if self.absorbed:
            return WalkerState.ABSORBED
        self.elapsed_time += self.domain.time_scale
        self.steps += 1
        displacement = self.step_sampler.draw_displacement(self.domain.dimension, self._step_scale)
        for j, dx in enumerate(displacement):
            self.position[j] += dx
        return self.check_boundary()

    def check_boundary(self) -> WalkerState:
        """Apply the outer reflection or the target absorption to the current position.

        The outer wall takes precedence: absorption is only tested when no
        reflection happened in this check.
        """
        r = radius(self.position)
        if r > self.domain.system_size:
            reflect_outer(self.position, self.domain.system_size, r)
        elif r < self.domain.target_size:
            self.absorbed = True
        return self.state
