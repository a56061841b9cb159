"""Quiet-point breakpoint search and automatic segmentation."""

from .scoring import adjusted_score, distance_factor, raw_score, raw_scores, triangular_scores
from .search import SearchParams, find_next_breakpoint, iter_sample_breakpoints
from .segmenter import AutoSegmenter, compute_breakpoints, search_params, segment_tiers

__all__ = [
    "raw_score",
    "raw_scores",
    "adjusted_score",
    "distance_factor",
    "triangular_scores",
    "SearchParams",
    "find_next_breakpoint",
    "iter_sample_breakpoints",
    "search_params",
    "compute_breakpoints",
    "segment_tiers",
    "AutoSegmenter",
]
