"""Experiments layer: batch search, benchmarks, and draw-stream export."""

from diffusion_search.experiments.batch import run_search_batch
from diffusion_search.experiments.benchmark import (
    BenchmarkResult,
    benchmark_draws,
    run_benchmark,
)
from diffusion_search.experiments.draws import draw_stream, export_draw_stream

__all__ = [
    "BenchmarkResult",
    "benchmark_draws",
    "draw_stream",
    "export_draw_stream",
    "run_benchmark",
    "run_search_batch",
]
