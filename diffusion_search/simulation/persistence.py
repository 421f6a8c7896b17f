"""Parquet persistence helpers for trial result streams."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from diffusion_search.config.types import TrialResult
from diffusion_search.io.schemas import (
    TRIAL_RESULT_COLUMNS,
    TRIAL_RESULTS_SCHEMA,
    TRIAL_RESULTS_SCHEMA_VERSION,
)


def new_trial_columns() -> dict[str, list[int | float | bool | str]]:
    """Return empty column buffers matching ``TRIAL_RESULTS_SCHEMA``."""
    return {name: [] for name in TRIAL_RESULT_COLUMNS}


def append_trial(columns: dict[str, list[int | float | bool | str]], result: TrialResult) -> None:
    """Append one trial as a row to the column buffers."""
    columns["schema_version"].append(TRIAL_RESULTS_SCHEMA_VERSION)
    for key, value in result.to_row().items():
        columns[key].append(value)


def flush_trial_columns(
    columns: dict[str, list[int | float | bool | str]],
    results_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trial rows to Parquet and clear in-memory buffers."""
    if not columns["seed"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=TRIAL_RESULTS_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(results_path, TRIAL_RESULTS_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer
