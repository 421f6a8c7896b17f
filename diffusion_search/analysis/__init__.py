"""Analysis layer: first-passage time statistics."""

from diffusion_search.analysis.stats import (
    SearchTimeSummary,
    absorbed_search_times,
    search_time_histogram,
    summarize_search_times,
)

__all__ = [
    "SearchTimeSummary",
    "absorbed_search_times",
    "search_time_histogram",
    "summarize_search_times",
]
