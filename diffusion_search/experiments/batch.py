"""Batch search orchestration: run every trial and persist the artifacts."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from diffusion_search.analysis.stats import (
    absorbed_search_times,
    search_time_histogram,
    summarize_search_times,
)
from diffusion_search.config.constants import FLUSH_THRESHOLD, MAX_BATCH_TRIALS
from diffusion_search.config.types import DomainConfig, RunConfig, TrialResult
from diffusion_search.io.paths import (
    histogram_path,
    logs_dir,
    search_summary_path,
    trial_results_path,
)
from diffusion_search.io.schemas import HISTOGRAM_SCHEMA, SUMMARY_SCHEMA_VERSION
from diffusion_search.simulation.engine import SimulationDriver
from diffusion_search.simulation.persistence import (
    append_trial,
    flush_trial_columns,
    new_trial_columns,
)

logger = logging.getLogger(__name__)


def run_search_batch(
    domain: DomainConfig,
    run: RunConfig,
    out_dir: Path,
    *,
    histogram_bins: int = 0,
    log_histogram: bool = False,
) -> list[TrialResult]:
    """Run all trials of ``run`` and write results, summary and histogram.

    Trial rows stream to ``logs/trial_results.parquet``; the summary JSON
    holds the configuration and :class:`SearchTimeSummary` fields. A
    histogram is written only when ``histogram_bins > 0`` and at least one
    trial was absorbed.
    """
    if run.total_trials > MAX_BATCH_TRIALS:
        raise ValueError("batch workload exceeds safety threshold; reduce set_count/repeat_count")
    if histogram_bins < 0:
        raise ValueError("histogram_bins must be >= 0")

    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    results_path = trial_results_path(out_dir)

    driver = SimulationDriver(domain, run)
    results: list[TrialResult] = []
    columns = new_trial_columns()
    writer: pq.ParquetWriter | None = None
    try:
        for result in driver.iter_trials():
            results.append(result)
            append_trial(columns, result)
            if len(columns["seed"]) >= FLUSH_THRESHOLD:
                writer = flush_trial_columns(columns, results_path, writer)
        writer = flush_trial_columns(columns, results_path, writer)
    finally:
        if writer is not None:
            writer.close()

    summary = summarize_search_times(results)
    logger.info(
        "batch finished: %d trials, %d absorbed, mfpt=%s",
        summary.trials,
        summary.absorbed,
        summary.mean_search_time,
    )
    payload = {
        "schema_version": SUMMARY_SCHEMA_VERSION,
        "domain": {
            "system_size": domain.system_size,
            "target_size": domain.target_size,
            "dimension": domain.dimension,
            "time_scale": domain.time_scale,
            "max_step_factor": domain.max_step_factor,
        },
        "run": {
            "searcher_count": run.searcher_count,
            "repeat_count": run.repeat_count,
            "set_count": run.set_count,
            "base_seed": run.base_seed,
            "max_steps": run.max_steps,
        },
        "summary": summary.to_dict(),
    }
    search_summary_path(out_dir).write_text(json.dumps(payload, ensure_ascii=False, indent=2))

    if histogram_bins > 0 and summary.absorbed > 0:
        edges, counts, density = search_time_histogram(
            absorbed_search_times(results), histogram_bins, log_bins=log_histogram
        )
        table = pa.Table.from_pydict(
            {
                "bin_left": edges[:-1].tolist(),
                "bin_right": edges[1:].tolist(),
                "count": counts.tolist(),
                "density": density.tolist(),
            },
            schema=HISTOGRAM_SCHEMA,
        )
        pq.write_table(table, histogram_path(out_dir))

    return results
