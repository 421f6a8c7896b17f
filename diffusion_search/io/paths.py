"""Path construction helpers for simulation output directories.

Centralises the directory/file naming conventions used by the batch, draw
export and benchmark layers.
"""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def trial_results_path(out_dir: Path) -> Path:
    """Return path to the per-trial results Parquet file."""
    return logs_dir(out_dir) / "trial_results.parquet"


def search_summary_path(out_dir: Path) -> Path:
    """Return path to the batch summary JSON file."""
    return logs_dir(out_dir) / "search_summary.json"


def histogram_path(out_dir: Path) -> Path:
    """Return path to the search-time histogram Parquet file."""
    return logs_dir(out_dir) / "search_time_histogram.parquet"


def draw_stream_path(out_dir: Path, kind: str) -> Path:
    """Return path to the raw draw stream Parquet file for *kind*."""
    return logs_dir(out_dir) / f"draws_{kind}.parquet"


def benchmark_path(out_dir: Path) -> Path:
    """Return path to the benchmark timings JSON file."""
    return logs_dir(out_dir) / "benchmark.json"
