"""Deterministic per-trial seed derivation."""

from __future__ import annotations

from diffusion_search.config.constants import (
    REPEAT_SEED_PRIME,
    SEARCHER_SEED_PRIME,
    SET_SEED_PRIME,
)


def derive_seed(
    base_seed: int,
    searcher_count: int,
    set_index: int,
    repeat_index: int,
    repeat_count: int = 0,
) -> int:
    """Combine the experiment coordinates into the engine seed of one trial.

    The set-level seed mixes the base seed with the searcher count, set
    index and repetition count through fixed primes; repetitions inside a
    set are then separated by adding ``repeat_index``.
    """
    set_seed = (
        base_seed
        + searcher_count * SEARCHER_SEED_PRIME
        + set_index * SET_SEED_PRIME
        + repeat_count * REPEAT_SEED_PRIME
    )
    return set_seed + repeat_index


def seeds_overlap(set_count: int, repeat_count: int) -> bool:
    """Whether trials of different sets would share a seed.

    Consecutive sets are offset by ``SET_SEED_PRIME``, so with more
    repetitions than that the last trials of one set reuse the first seeds
    of the next.
    """
    return set_count > 1 and repeat_count > SET_SEED_PRIME
