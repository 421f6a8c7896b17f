"""Core simulation engine: seeded search trials for one walker."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from diffusion_search.config.types import DomainConfig, RunConfig, TerminationReason, TrialResult
from diffusion_search.domain.walker import Walker
from diffusion_search.rng.bounded import BoundedStepSampler
from diffusion_search.rng.gaussian import GaussianSampler
from diffusion_search.rng.uniform import UniformEngine
from diffusion_search.simulation.seeding import derive_seed, seeds_overlap

logger = logging.getLogger(__name__)


class SimulationDriver:
    """Run ``set_count * repeat_count`` independent first-passage trials.

    The driver owns its uniform engine and Gaussian sampler; every trial
    reseeds both from :func:`derive_seed`, so a trial is reproducible from
    its ``(set_index, repeat_index)`` alone regardless of what ran before.
    """

    def __init__(
        self,
        domain: DomainConfig,
        run: RunConfig,
        engine: UniformEngine | None = None,
        gaussian: GaussianSampler | None = None,
    ) -> None:
        self.domain = domain
        self.run_config = run
        if seeds_overlap(run.set_count, run.repeat_count):
            logger.warning(
                "repeat_count=%d exceeds the set seed offset; trials in different sets "
                "share seeds and repeat each other",
                run.repeat_count,
            )
        self.engine = engine if engine is not None else UniformEngine(run.base_seed)
        if gaussian is None:
            gaussian = GaussianSampler(self.engine, max_tries=run.max_rejection_tries)
        elif gaussian.engine is not self.engine:
            raise ValueError("gaussian sampler must draw from the driver's engine")
        self.gaussian = gaussian
        self.step_sampler = BoundedStepSampler(
            self.gaussian,
            domain.max_step_magnitude,
            max_tries=run.max_rejection_tries,
        )
        self.walker = Walker(
            domain,
            self.engine,
            self.step_sampler,
            max_placement_tries=max(run.max_rejection_tries, domain.min_placement_tries),
        )

    def trial_seed(self, set_index: int, repeat_index: int) -> int:
        return derive_seed(
            self.run_config.base_seed,
            self.run_config.searcher_count,
            set_index,
            repeat_index,
            repeat_count=self.run_config.repeat_count,
        )

    def run_trial(self, set_index: int, repeat_index: int) -> TrialResult:
        """Reseed, place the walker and step it until absorption or the step cap."""
        seed = self.trial_seed(set_index, repeat_index)
        self.engine.reseed(seed)
        self.gaussian.reseed()

        walker = self.walker
        walker.place()
        max_steps = self.run_config.max_steps
        if max_steps is None:
            while not walker.absorbed:
                walker.step()
        else:
            while not walker.absorbed and walker.steps < max_steps:
                walker.step()

        reason = TerminationReason.ABSORBED if walker.absorbed else TerminationReason.STEP_CAP
        if walker.absorbed:
            logger.debug(
                "set=%d repeat=%d seed=%d absorbed after %d steps (t=%.6g)",
                set_index,
                repeat_index,
                seed,
                walker.steps,
                walker.elapsed_time,
            )
        else:
            logger.warning(
                "set=%d repeat=%d seed=%d hit the step cap (%d) without absorption",
                set_index,
                repeat_index,
                seed,
                walker.steps,
            )
        return TrialResult(
            set_index=set_index,
            repeat_index=repeat_index,
            seed=seed,
            search_time=walker.elapsed_time,
            steps=walker.steps,
            absorbed=walker.absorbed,
            termination_reason=reason.value,
        )

    def iter_set(self, set_index: int) -> Iterator[TrialResult]:
        for repeat_index in range(self.run_config.repeat_count):
            yield self.run_trial(set_index, repeat_index)

    def iter_trials(self) -> Iterator[TrialResult]:
        """Yield every trial in set-major order."""
        for set_index in range(self.run_config.set_count):
            yield from self.iter_set(set_index)

    def run(self) -> list[TrialResult]:
        return list(self.iter_trials())
