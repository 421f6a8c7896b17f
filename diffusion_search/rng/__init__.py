"""Random layer: uniform engine, Gaussian sampler, and bounded step sampler."""

from diffusion_search.rng.bounded import BoundedStepSampler, bounded_deviate
from diffusion_search.rng.gaussian import GaussianSampler, polar_pair
from diffusion_search.rng.uniform import UniformEngine

__all__ = [
    "BoundedStepSampler",
    "GaussianSampler",
    "UniformEngine",
    "bounded_deviate",
    "polar_pair",
]
