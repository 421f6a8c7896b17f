"""Raw uniform / Gaussian draw streams for distribution checks."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from diffusion_search.config.constants import DRAW_KINDS
from diffusion_search.io.paths import draw_stream_path, logs_dir
from diffusion_search.io.schemas import DRAW_STREAM_SCHEMA
from diffusion_search.rng.gaussian import GaussianSampler
from diffusion_search.rng.uniform import UniformEngine


def _validate_kind(kind: str) -> None:
    if kind not in DRAW_KINDS:
        valid = ", ".join(DRAW_KINDS)
        raise ValueError(f"kind must be one of {valid}")


def make_drawer(kind: str, seed: int) -> Callable[[], float]:
    """Return a zero-argument callable producing draws of ``kind``."""
    _validate_kind(kind)
    engine = UniformEngine(seed)
    if kind == "uniform":
        return engine.draw
    return GaussianSampler(engine).draw


def draw_stream(kind: str, n: int, seed: int) -> np.ndarray:
    """Draw ``n`` consecutive values from a freshly seeded source."""
    if n < 1:
        raise ValueError("n must be >= 1")
    draw = make_drawer(kind, seed)
    values = np.empty(n, dtype=np.float64)
    for i in range(n):
        values[i] = draw()
    return values


def export_draw_stream(kind: str, n: int, seed: int, out_dir: Path) -> Path:
    """Write a draw stream to ``logs/draws_<kind>.parquet`` and return its path."""
    values = draw_stream(kind, n, seed)
    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    path = draw_stream_path(out_dir, kind)
    table = pa.Table.from_pydict(
        {"index": np.arange(n, dtype=np.int64), "value": values},
        schema=DRAW_STREAM_SCHEMA,
    )
    pq.write_table(table, path)
    return path
