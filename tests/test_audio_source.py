from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from pydub.generators import Sine

from tierseg.audio import ArraySampleSource, PydubSampleSource, reduce_to_peaks


def test_reduce_to_peaks_keeps_max_and_min_per_bucket() -> None:
    frames = np.array([[0.1], [-0.5], [0.3], [0.2]])

    peaks = reduce_to_peaks(frames, 2)

    assert peaks.shape == (2, 1, 2)
    assert peaks[0, 0].tolist() == pytest.approx([0.1, -0.5])
    assert peaks[1, 0].tolist() == pytest.approx([0.3, 0.2])


def test_reduce_to_peaks_never_exceeds_frame_count() -> None:
    frames = np.zeros((3, 2))

    assert reduce_to_peaks(frames, 10).shape == (3, 2, 2)
    assert reduce_to_peaks(frames, 0).shape == (0, 2, 2)


def test_array_source_accepts_mono_magnitudes() -> None:
    source = ArraySampleSource(np.array([0.1, 0.2, 0.3]), duration_s=0.003)

    samples = source.get_samples(2)

    assert samples.shape == (2, 1, 2)
    assert samples[1, 0].tolist() == pytest.approx([0.2, -0.2])
    assert source.total_duration() == pytest.approx(0.003)


def test_array_source_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        ArraySampleSource(np.zeros((4, 3)), duration_s=1.0)


def test_pydub_source_reduces_decoded_audio(tmp_path: Path) -> None:
    audio_path = tmp_path / "tone.wav"
    tone = Sine(440).to_audio_segment(duration=1000).set_frame_rate(16_000).set_channels(2)
    tone.export(audio_path, format="wav")

    source = PydubSampleSource(audio_path)
    samples = source.get_samples(1000)

    assert source.total_duration() == pytest.approx(1.0, rel=0.01)
    assert samples.shape == (1000, 2, 2)
    assert np.all(np.abs(samples) <= 1.0)
    assert samples[:, :, 0].max() > 0.5


def test_pydub_source_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        PydubSampleSource(tmp_path / "missing.wav")
