"""CLI entrypoint for search-time runs.

This module owns CLI argument parsing and mode dispatch. All domain logic
lives in the extracted modules:

- ``diffusion_search.config``                 – configuration dataclasses
- ``diffusion_search.simulation.engine``      – ``SimulationDriver``
- ``diffusion_search.experiments.batch``      – batch run + persistence
- ``diffusion_search.experiments.benchmark``  – wall-clock timing
- ``diffusion_search.experiments.draws``      – raw draw stream export
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from diffusion_search.analysis.stats import summarize_search_times
from diffusion_search.config.constants import (
    BASE_SEED,
    DIMENSION,
    DRAW_KINDS,
    DRAW_SEED,
    MAX_REJECTION_TRIES,
    MAX_STEP_FACTOR,
    N_DRAWS,
    REPEAT_COUNT,
    SEARCHER_COUNT,
    SET_COUNT,
    SYSTEM_SIZE,
    TARGET_SIZE,
    TIME_SCALE,
)
from diffusion_search.config.types import DomainConfig, RunConfig
from diffusion_search.experiments.batch import run_search_batch
from diffusion_search.experiments.benchmark import benchmark_draws, run_benchmark
from diffusion_search.experiments.draws import export_draw_stream
from diffusion_search.io.paths import benchmark_path, logs_dir

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_optional_int(raw: object, key: str) -> int | None:
    """Like :func:`_coerce_int` but ``None`` (JSON null) passes through."""
    if raw is None:
        return None
    return _coerce_int(raw, key)


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _parse_draw_kind(raw_kind: str) -> str:
    """Validate a draw-stream kind from CLI/config."""
    if raw_kind not in DRAW_KINDS:
        valid = ", ".join(DRAW_KINDS)
        raise ValueError(f"draws must be one of {valid}")
    return raw_kind


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Simulate first-passage times of a diffusing searcher"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--system-size", type=float, default=None)
    parser.add_argument("--target-size", type=float, default=None)
    parser.add_argument("--dimension", type=int, default=None)
    parser.add_argument("--time-scale", type=float, default=None, help="time per step (mu0)")
    parser.add_argument("--max-step-factor", type=float, default=None)
    parser.add_argument("--searcher-count", type=int, default=None)
    parser.add_argument("--repeat-count", type=int, default=None)
    parser.add_argument("--set-count", type=int, default=None)
    parser.add_argument("--base-seed", type=int, default=None)
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="per-trial step cap; unset keeps the unbounded loop",
    )
    parser.add_argument("--max-rejection-tries", type=int, default=None)
    parser.add_argument("--histogram-bins", type=int, default=None)
    parser.add_argument("--log-histogram", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--n-draws", type=int, default=None)
    parser.add_argument("--draw-seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--benchmark", action=argparse.BooleanOptionalAction, default=None)
    mode_group.add_argument(
        "--draws",
        type=str,
        choices=list(DRAW_KINDS),
        default=None,
        help="export a raw draw stream instead of running trials",
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for search-time runs.

    Supports ``--config path/to/config.json`` for experiment reproducibility.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")

    try:
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING")
        out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "data"))
        is_benchmark = _get_bool(args.benchmark, "benchmark", file_cfg, False)
        draws_raw = _get_val(args.draws, "draws", file_cfg, None)
        draws_kind = (
            None if draws_raw is None else _parse_draw_kind(_coerce_str(draws_raw, "draws"))
        )
        n_draws = _get_int(args.n_draws, "n_draws", file_cfg, N_DRAWS)
        draw_seed = _get_int(args.draw_seed, "draw_seed", file_cfg, DRAW_SEED)
        histogram_bins = _get_int(args.histogram_bins, "histogram_bins", file_cfg, 0)
        log_histogram = _get_bool(args.log_histogram, "log_histogram", file_cfg, False)

        domain = DomainConfig(
            system_size=_get_float(args.system_size, "system_size", file_cfg, SYSTEM_SIZE),
            target_size=_get_float(args.target_size, "target_size", file_cfg, TARGET_SIZE),
            dimension=_get_int(args.dimension, "dimension", file_cfg, DIMENSION),
            time_scale=_get_float(args.time_scale, "time_scale", file_cfg, TIME_SCALE),
            max_step_factor=_get_float(
                args.max_step_factor, "max_step_factor", file_cfg, MAX_STEP_FACTOR
            ),
        )
        run = RunConfig(
            searcher_count=_get_int(
                args.searcher_count, "searcher_count", file_cfg, SEARCHER_COUNT
            ),
            repeat_count=_get_int(args.repeat_count, "repeat_count", file_cfg, REPEAT_COUNT),
            set_count=_get_int(args.set_count, "set_count", file_cfg, SET_COUNT),
            base_seed=_get_int(args.base_seed, "base_seed", file_cfg, BASE_SEED),
            max_steps=_coerce_optional_int(
                _get_val(args.max_steps, "max_steps", file_cfg, None), "max_steps"
            ),
            max_rejection_tries=_get_int(
                args.max_rejection_tries, "max_rejection_tries", file_cfg, MAX_REJECTION_TRIES
            ),
        )
    except ValueError as exc:
        # InvalidConfigurationError is a ValueError
        parser.error(str(exc))

    if is_benchmark and draws_kind is not None:
        parser.error(
            "--benchmark and --draws cannot both be enabled; "
            "disable one via CLI or in the config file"
        )

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if draws_kind is not None:
        path = export_draw_stream(draws_kind, n_draws, draw_seed, out_dir)
        summary: dict[str, object] = {
            "mode": "draws",
            "kind": draws_kind,
            "n_draws": n_draws,
            "seed": draw_seed,
            "path": str(path),
        }
    elif is_benchmark:
        result = run_benchmark(domain, run)
        summary = {
            "mode": "benchmark",
            **result.to_dict(),
            "uniform_ns_per_draw": benchmark_draws("uniform", n_draws, draw_seed),
            "gaussian_ns_per_draw": benchmark_draws("gaussian", n_draws, draw_seed),
        }
        logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
        benchmark_path(out_dir).write_text(json.dumps(summary, ensure_ascii=False, indent=2))
    else:
        results = run_search_batch(
            domain,
            run,
            out_dir,
            histogram_bins=histogram_bins,
            log_histogram=log_histogram,
        )
        stats = summarize_search_times(results)
        summary = {
            "mode": "search",
            "total_trials": stats.trials,
            "absorbed": stats.absorbed,
            "step_capped": stats.trials - stats.absorbed,
            "mean_search_time": stats.mean_search_time,
            "stddev_search_time": stats.stddev_search_time,
        }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
