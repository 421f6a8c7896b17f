"""First-passage time simulation of a diffusing searcher in a bounded domain."""

from diffusion_search.config.types import DomainConfig, RunConfig, TrialResult
from diffusion_search.domain.walker import Walker, WalkerState
from diffusion_search.errors import (
    DiffusionSearchError,
    InvalidConfigurationError,
    RejectionLimitError,
)
from diffusion_search.rng import BoundedStepSampler, GaussianSampler, UniformEngine
from diffusion_search.simulation import SimulationDriver, derive_seed

__all__ = [
    "BoundedStepSampler",
    "DiffusionSearchError",
    "DomainConfig",
    "GaussianSampler",
    "InvalidConfigurationError",
    "RejectionLimitError",
    "RunConfig",
    "SimulationDriver",
    "TrialResult",
    "UniformEngine",
    "Walker",
    "WalkerState",
    "derive_seed",
]
