"""First-passage time statistics and histograms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass

import numpy as np

from diffusion_search.config.types import TrialResult


@dataclass(frozen=True)
class SearchTimeSummary:
    """Aggregate statistics over a batch of trials.

    Time statistics cover absorbed trials only; they are ``None`` when no
    trial was absorbed.
    """

    trials: int
    absorbed: int
    absorption_rate: float
    mean_search_time: float | None
    stddev_search_time: float | None
    median_search_time: float | None
    p05_search_time: float | None
    p95_search_time: float | None
    mean_steps: float | None

    def to_dict(self) -> dict[str, int | float | None]:
        return asdict(self)


def absorbed_search_times(results: Iterable[TrialResult]) -> np.ndarray:
    """Search times of absorbed trials as a float64 array."""
    return np.asarray([r.search_time for r in results if r.absorbed], dtype=np.float64)


def summarize_search_times(results: Sequence[TrialResult]) -> SearchTimeSummary:
    """Mean first-passage time, spread and tail percentiles of a batch."""
    trials = len(results)
    absorbed = [r for r in results if r.absorbed]
    n_absorbed = len(absorbed)
    rate = n_absorbed / trials if trials else 0.0
    if not absorbed:
        return SearchTimeSummary(
            trials=trials,
            absorbed=0,
            absorption_rate=rate,
            mean_search_time=None,
            stddev_search_time=None,
            median_search_time=None,
            p05_search_time=None,
            p95_search_time=None,
            mean_steps=None,
        )

    times = absorbed_search_times(absorbed)
    steps = np.asarray([r.steps for r in absorbed], dtype=np.float64)
    p05, median, p95 = np.percentile(times, [5.0, 50.0, 95.0])
    return SearchTimeSummary(
        trials=trials,
        absorbed=n_absorbed,
        absorption_rate=rate,
        mean_search_time=float(times.mean()),
        # Population spread, matching <t^2> - <t>^2.
        stddev_search_time=float(times.std()),
        median_search_time=float(median),
        p05_search_time=float(p05),
        p95_search_time=float(p95),
        mean_steps=float(steps.mean()),
    )


def search_time_histogram(
    times: Sequence[float] | np.ndarray,
    bins: int,
    *,
    log_bins: bool = False,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Normalised density histogram of search times.

    Returns ``(edges, counts, density)``; ``density`` integrates to 1 over
    the bins. With ``log_bins`` the edges are spaced geometrically between
    the smallest and largest time, which resolves the long tail of
    first-passage distributions.
    """
    if bins < 1:
        raise ValueError("bins must be >= 1")
    values = np.asarray(times, dtype=np.float64)
    if values.size == 0:
        raise ValueError("times must not be empty")
    if log_bins:
        lo, hi = float(values.min()), float(values.max())
        if lo <= 0.0:
            raise ValueError("log_bins requires strictly positive times")
        if hi == lo:
            hi = lo * 2.0
        edges = np.geomspace(lo, hi, bins + 1)
    else:
        edges = np.histogram_bin_edges(values, bins=bins)
    counts, edges = np.histogram(values, bins=edges)
    widths = np.diff(edges)
    density = counts / (counts.sum() * widths)
    return edges, counts, density
