"""Domain layer: search-shell geometry and the walker state machine."""

from diffusion_search.domain.boundary import radius, reflect_outer, sample_annulus_point
from diffusion_search.domain.walker import Walker, WalkerState

__all__ = [
    "Walker",
    "WalkerState",
    "radius",
    "reflect_outer",
    "sample_annulus_point",
]
