"""Parquet schema definitions for search-time artifacts.

All Arrow schemas used for persisting trial results, search-time histograms
and raw draw streams are centralised here so that every module works
against the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

TRIAL_RESULTS_SCHEMA_VERSION = 1
SUMMARY_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Trial results
# ---------------------------------------------------------------------------

TRIAL_RESULTS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("set_index", pa.int64()),
        ("repeat_index", pa.int64()),
        ("seed", pa.int64()),
        ("search_time", pa.float64()),
        ("steps", pa.int64()),
        ("absorbed", pa.bool_()),
        ("termination_reason", pa.string()),
    ]
)

TRIAL_RESULT_COLUMNS = [field.name for field in TRIAL_RESULTS_SCHEMA]

# ---------------------------------------------------------------------------
# Analysis outputs
# ---------------------------------------------------------------------------

HISTOGRAM_SCHEMA = pa.schema(
    [
        ("bin_left", pa.float64()),
        ("bin_right", pa.float64()),
        ("count", pa.int64()),
        ("density", pa.float64()),
    ]
)

# ---------------------------------------------------------------------------
# Raw draw streams
# ---------------------------------------------------------------------------

DRAW_STREAM_SCHEMA = pa.schema(
    [
        ("index", pa.int64()),
        ("value", pa.float64()),
    ]
)
