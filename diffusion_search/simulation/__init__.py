"""Simulation engine: seeded trials, seed derivation, and Parquet persistence."""

from diffusion_search.simulation.engine import SimulationDriver
from diffusion_search.simulation.persistence import (
    append_trial,
    flush_trial_columns,
    new_trial_columns,
)
from diffusion_search.simulation.seeding import derive_seed, seeds_overlap

__all__ = [
    "SimulationDriver",
    "append_trial",
    "derive_seed",
    "flush_trial_columns",
    "new_trial_columns",
    "seeds_overlap",
]
