"""Loudness scores for choosing cut points.

``raw_score`` and ``adjusted_score`` score a single position; the breakpoint
search uses their whole-buffer forms ``raw_scores`` and ``triangular_scores``.
"""

from __future__ import annotations

import numpy as np


def raw_score(samples: np.ndarray, position: int) -> float:
    """Loudness at ``position``: the summed peak magnitudes of every channel.

    Lower scores mark quieter, better cut points.
    """

    if position < 0 or position >= samples.shape[0]:
        raise IndexError(f"sample position {position} outside buffer of {samples.shape[0]}")
    return float(np.abs(samples[position]).sum())


def raw_scores(samples: np.ndarray) -> np.ndarray:
    if samples.shape[0] == 0:
        return np.zeros(0)
    return np.abs(samples).reshape(samples.shape[0], -1).sum(axis=1)


def distance_factor(offset: int, clamping_factor: float) -> float:
    return (offset * clamping_factor + 1) ** 2


def triangular_weights(window: int) -> np.ndarray:
    """Weights for offsets ``-window..window``, 1 at the centre and 0 at the edges."""

    if window <= 0:
        return np.ones(1)
    offsets = np.abs(np.arange(-window, window + 1))
    return (window - offsets) / window


def adjusted_score(
    scores: np.ndarray, position: int, factor: float, window: int
) -> float:
    lo = max(0, position - window)
    hi = min(len(scores), position + window + 1)
    weights = triangular_weights(window)[lo - position + window : hi - position + window]
    return float(np.dot(scores[lo:hi], weights)) * factor


def triangular_scores(scores: np.ndarray, window: int) -> np.ndarray:
    """``adjusted_score`` without the distance factor, for every position."""

    if len(scores) == 0:
        return np.zeros(0)
    half = max(0, window)
    full = np.convolve(scores, triangular_weights(window), mode="full")
    return full[half : half + len(scores)]
