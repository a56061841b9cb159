from __future__ import annotations

import numpy as np
import pytest

from tierseg.segmentation.scoring import (
    adjusted_score,
    distance_factor,
    raw_score,
    raw_scores,
    triangular_scores,
)


def _buffer() -> np.ndarray:
    return np.array(
        [
            [[0.1, -0.1], [0.0, 0.0]],
            [[0.5, -0.25], [0.1, -0.1]],
            [[0.0, 0.0], [0.0, 0.0]],
        ]
    )


def test_raw_score_sums_magnitudes_over_channels() -> None:
    samples = _buffer()

    assert raw_score(samples, 1) == pytest.approx(0.95)
    assert raw_score(samples, 2) == 0.0
    assert raw_scores(samples).tolist() == pytest.approx([0.2, 0.95, 0.0])


def test_raw_score_rejects_positions_outside_buffer() -> None:
    samples = _buffer()
    with pytest.raises(IndexError):
        raw_score(samples, 3)
    with pytest.raises(IndexError):
        raw_score(samples, -1)


def test_distance_factor_grows_quadratically() -> None:
    assert distance_factor(0, 0.1) == pytest.approx(1.0)
    assert distance_factor(10, 0.1) == pytest.approx(4.0)
    assert distance_factor(20, 0.1) == pytest.approx(9.0)


def test_adjusted_score_uses_triangular_weights() -> None:
    scores = np.array([0.0, 1.0, 2.0, 3.0, 4.0])

    assert adjusted_score(scores, 2, 1.0, window=2) == pytest.approx(4.0)
    assert adjusted_score(scores, 2, 2.0, window=2) == pytest.approx(8.0)
    assert adjusted_score(scores, 0, 1.0, window=2) == pytest.approx(0.5)
    assert adjusted_score(scores, 4, 1.0, window=0) == pytest.approx(4.0)


def test_triangular_scores_match_pointwise_scores() -> None:
    rng = np.random.default_rng(7)
    scores = rng.random(40)

    smoothed = triangular_scores(scores, 5)

    expected = [adjusted_score(scores, pos, 1.0, window=5) for pos in range(len(scores))]
    assert smoothed.tolist() == pytest.approx(expected)


def test_triangular_scores_keep_length_for_short_input() -> None:
    scores = np.array([1.0, 2.0])

    smoothed = triangular_scores(scores, 4)

    assert len(smoothed) == 2
    assert smoothed[0] == pytest.approx(1.0 + 2.0 * 0.75)
