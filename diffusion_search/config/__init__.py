"""Configuration layer: constants and typed config dataclasses."""

from diffusion_search.config.constants import (
    BASE_SEED,
    DIMENSION,
    FLUSH_THRESHOLD,
    MAX_BATCH_TRIALS,
    MAX_REJECTION_TRIES,
    MAX_STEP_FACTOR,
    REPEAT_COUNT,
    SEARCHER_COUNT,
    SET_COUNT,
    SYSTEM_SIZE,
    TARGET_SIZE,
    TIME_SCALE,
)
from diffusion_search.config.types import (
    DomainConfig,
    RunConfig,
    TerminationReason,
    TrialResult,
)

__all__ = [
    "BASE_SEED",
    "DIMENSION",
    "DomainConfig",
    "FLUSH_THRESHOLD",
    "MAX_BATCH_TRIALS",
    "MAX_REJECTION_TRIES",
    "MAX_STEP_FACTOR",
    "REPEAT_COUNT",
    "RunConfig",
    "SEARCHER_COUNT",
    "SET_COUNT",
    "SYSTEM_SIZE",
    "TARGET_SIZE",
    "TIME_SCALE",
    "TerminationReason",
    "TrialResult",
]
