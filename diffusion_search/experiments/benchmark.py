"""Wall-clock throughput of the search loop and of the random sources."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass

from diffusion_search.config.types import DomainConfig, RunConfig
from diffusion_search.experiments.draws import make_drawer
from diffusion_search.simulation.engine import SimulationDriver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing of one benchmark batch."""

    sets: int
    trials: int
    total_steps: int
    total_seconds: float
    seconds_per_set: float
    seconds_per_trial: float
    steps_per_second: float

    def to_dict(self) -> dict[str, int | float]:
        return asdict(self)


def run_benchmark(domain: DomainConfig, run: RunConfig) -> BenchmarkResult:
    """Time ``set_count`` sets of ``repeat_count`` trials each."""
    driver = SimulationDriver(domain, run)
    total_steps = 0
    trials = 0
    set_seconds: list[float] = []
    for set_index in range(run.set_count):
        start = time.perf_counter()
        for result in driver.iter_set(set_index):
            total_steps += result.steps
            trials += 1
        elapsed = time.perf_counter() - start
        set_seconds.append(elapsed)
        logger.info("set %d: %d trials in %.5es", set_index, run.repeat_count, elapsed)

    total = sum(set_seconds)
    return BenchmarkResult(
        sets=run.set_count,
        trials=trials,
        total_steps=total_steps,
        total_seconds=total,
        seconds_per_set=total / run.set_count,
        seconds_per_trial=total / trials,
        steps_per_second=total_steps / total if total > 0.0 else 0.0,
    )


def benchmark_draws(kind: str, n: int, seed: int, warmup: int | None = None) -> float:
    """Return nanoseconds per draw of ``kind`` after an untimed warm-up.

    The warm-up defaults to ``n`` draws from the same stream.
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    draw = make_drawer(kind, seed)
    for _ in range(n if warmup is None else warmup):
        draw()
    start = time.perf_counter_ns()
    for _ in range(n):
        draw()
    return (time.perf_counter_ns() - start) / n
