"""Centralized constants for the random engine and search simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Combined congruential generator (L'Ecuyer with Bays-Durham shuffle)
# ---------------------------------------------------------------------------

IM1 = 2147483563
"""Modulus of the primary congruential sequence."""

IM2 = 2147483399
"""Modulus of the secondary congruential sequence."""

AM = 1.0 / IM1
"""Scale factor mapping a combined integer output onto (0, 1)."""

IMM1 = IM1 - 1
"""Wrap offset applied when the combined output drops below 1."""

IA1 = 40014
IA2 = 40692
"""Multipliers of the primary and secondary sequences."""

IQ1 = 53668
IQ2 = 52774
"""Schrage quotients (modulus // multiplier)."""

IR1 = 12211
IR2 = 3791
"""Schrage remainders (modulus % multiplier)."""

NTAB = 32
"""Shuffle-table size."""

NDIV = 1 + IMM1 // NTAB
"""Divisor mapping the previous output onto a shuffle-table slot."""

WARMUP_DRAWS = NTAB + 8
"""Primary-sequence iterations run by a reseed (the last NTAB fill the table)."""

EPS = 1.2e-7
"""Single-precision epsilon used to keep draws strictly below 1."""

RNMX = 1.0 - EPS
"""Largest value a uniform draw can return."""

# ---------------------------------------------------------------------------
# Seed derivation (all multipliers are primes)
# ---------------------------------------------------------------------------

SEARCHER_SEED_PRIME = 5413
SET_SEED_PRIME = 733
REPEAT_SEED_PRIME = 13

# ---------------------------------------------------------------------------
# Reference run defaults
# ---------------------------------------------------------------------------

SYSTEM_SIZE = 10.0
"""Default outer (reflecting) radius."""

TARGET_SIZE = 1.0
"""Default inner (absorbing) radius."""

DIMENSION = 2
"""Default spatial dimension."""

TIME_SCALE = 1e-3
"""Default time increment per step (mu0)."""

SEARCHER_COUNT = 1
REPEAT_COUNT = 100
SET_COUNT = 10

BASE_SEED = 1231423
"""Default base seed of the reference benchmark."""

MAX_STEP_FACTOR = 10.0
"""Per-axis Gaussian deviates are truncated at this multiple of the system size."""

MAX_REJECTION_TRIES = 10_000
"""Retry budget for every rejection-sampling loop."""

MIN_PLACEMENT_ACCEPTANCE = 1e-3
"""Smallest shell-to-cube volume ratio accepted for start-point placement."""

PLACEMENT_TRIES_MARGIN = 50.0
"""Placement budget in expected-tries units; a placement fails with odds ~exp(-50)."""

# ---------------------------------------------------------------------------
# Batch / persistence
# ---------------------------------------------------------------------------

FLUSH_THRESHOLD = 4_096
"""Flush trial rows to Parquet once this in-memory row count is reached."""

MAX_BATCH_TRIALS = 10_000_000
"""Safety cap on set_count * repeat_count for one batch run."""

DRAW_KINDS: tuple[str, ...] = ("uniform", "gaussian")
"""Raw draw streams that can be exported or benchmarked."""

DRAW_SEED = 1231412314
"""Default seed of exported / benchmarked draw streams."""

N_DRAWS = 1_000_000
"""Default length of an exported / benchmarked draw stream."""
