from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from diffusion_search.config.types import TrialResult
from diffusion_search.io.schemas import TRIAL_RESULT_COLUMNS, TRIAL_RESULTS_SCHEMA_VERSION
from diffusion_search.simulation.persistence import (
    append_trial,
    flush_trial_columns,
    new_trial_columns,
)


def _result(repeat_index: int, absorbed: bool = True) -> TrialResult:
    return TrialResult(
        set_index=0,
        repeat_index=repeat_index,
        seed=1000 + repeat_index,
        search_time=0.1 * (repeat_index + 1),
        steps=repeat_index + 1,
        absorbed=absorbed,
        termination_reason="absorbed" if absorbed else "step_cap",
    )


def test_new_columns_are_empty() -> None:
    columns = new_trial_columns()
    assert list(columns) == TRIAL_RESULT_COLUMNS
    assert all(values == [] for values in columns.values())


def test_append_stamps_schema_version() -> None:
    columns = new_trial_columns()
    append_trial(columns, _result(0))
    assert columns["schema_version"] == [TRIAL_RESULTS_SCHEMA_VERSION]
    assert columns["seed"] == [1000]


def test_flush_without_rows_keeps_writer_unset(tmp_path: Path) -> None:
    path = tmp_path / "trials.parquet"
    assert flush_trial_columns(new_trial_columns(), path, None) is None
    assert not path.exists()


def test_repeated_flushes_append_row_groups(tmp_path: Path) -> None:
    path = tmp_path / "trials.parquet"
    columns = new_trial_columns()
    writer = None
    for i in range(5):
        append_trial(columns, _result(i, absorbed=i != 4))
        if i % 2 == 1:
            writer = flush_trial_columns(columns, path, writer)
            assert columns["seed"] == []
    writer = flush_trial_columns(columns, path, writer)
    assert writer is not None
    writer.close()

    table = pq.read_table(path)
    assert table.num_rows == 5
    assert table.column("repeat_index").to_pylist() == [0, 1, 2, 3, 4]
    assert table.column("termination_reason").to_pylist()[-1] == "step_cap"
