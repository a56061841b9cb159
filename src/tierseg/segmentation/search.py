from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from tierseg.segmentation.scoring import distance_factor, triangular_scores


@dataclass(frozen=True)
class SearchParams:
    """Segment length limits and scoring shape, all in samples."""

    min_samples: int
    max_samples: int
    pause_window: int
    clamping_factor: float

    @property
    def ideal_samples(self) -> int:
        return max(1, (self.min_samples + self.max_samples) // 2)


def find_next_breakpoint(
    scores: np.ndarray,
    last_break: int,
    ideal_length: int,
    params: SearchParams,
) -> int:
    """Pick the quietest sample near ``last_break + ideal_length``.

    ``scores`` are the raw scores of the whole buffer. Candidates are evaluated
    outward from the target in pairs, each weighted by its distance from the
    target, and the search stops early once the best candidate is well below
    the running mean and the signal is rising on both sides.
    """

    window = params.pause_window
    radius = ideal_length + window - params.min_samples
    target = last_break + ideal_length

    # index k of the local arrays is sample last_break + k
    raw = np.zeros(2 * ideal_length + 1)
    available = scores[last_break : last_break + len(raw)]
    raw[: len(available)] = available
    smoothed = triangular_scores(raw, window).tolist()
    raw_list = raw.tolist()

    best_break = target
    best_score = math.inf
    average = 0.0
    evaluated = 0

    for i in range(max(1, window), radius):
        factor = distance_factor(i, params.clamping_factor)
        right = ideal_length + i - window
        left = ideal_length - i + window
        offsets = (right,) if right == left else (right, left)

        total = 0.0
        for offset in offsets:
            score = smoothed[offset] * factor
            total += score
            if score < best_score:
                best_score = score
                best_break = last_break + offset
        average = (average * evaluated + total) / (evaluated + len(offsets))
        evaluated += len(offsets)

        if (
            best_score < average / 2
            and i < ideal_length
            and raw_list[ideal_length + i] < raw_list[ideal_length + i + 1]
            and raw_list[ideal_length - i] < raw_list[ideal_length - i - 1]
        ):
            break

    return best_break


def iter_sample_breakpoints(scores: np.ndarray, params: SearchParams) -> Iterator[int]:
    """Yield interior breakpoints as sample indices, in increasing order.

    The remainder after the last yielded index is shorter than
    ``params.max_samples`` and is left for the caller to close off.
    """

    remaining = len(scores)
    last_break = 0
    ideal_length = params.ideal_samples

    while remaining >= params.max_samples:
        if remaining < ideal_length * 2:
            ideal_length = max(1, remaining // 2)
        best_break = find_next_breakpoint(scores, last_break, ideal_length, params)
        remaining -= best_break - last_break
        last_break = best_break
        yield best_break
