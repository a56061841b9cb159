from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

import numpy as np
from pydub import AudioSegment

from tierseg.utils import get_logger

logger = get_logger(__name__)


class SampleSource(Protocol):
    """Supplies the duration and peak-pair buffer of one recording.

    ``get_samples`` returns an array shaped ``(samples, channels, 2)`` holding
    the positive and negative peak of every bucket. The first axis may be
    shorter than requested when the stream runs out.
    """

    def total_duration(self) -> float:
        ...

    def get_samples(self, max_samples: int) -> np.ndarray:
        ...


class ArraySampleSource:
    """In-memory source over an already reduced peak-pair buffer."""

    def __init__(self, samples: np.ndarray, duration_s: float) -> None:
        samples = np.asarray(samples, dtype=np.float64)
        if samples.ndim == 1:
            samples = np.stack([samples, -samples], axis=-1)[:, np.newaxis, :]
        if samples.ndim != 3 or samples.shape[2] != 2:
            raise ValueError("samples must be shaped (samples, channels, 2)")
        if duration_s < 0:
            raise ValueError("duration_s must not be negative")
        self._samples = samples
        self._duration_s = float(duration_s)

    def total_duration(self) -> float:
        return self._duration_s

    def get_samples(self, max_samples: int) -> np.ndarray:
        return self._samples[: max(0, int(max_samples))]


class PydubSampleSource:
    """Decodes a media file with pydub and reduces it to peak pairs."""

    def __init__(self, media_path: Path) -> None:
        media_path = media_path.expanduser().resolve()
        if not media_path.exists():
            raise FileNotFoundError(f"Audio file not found: {media_path}")
        self.media_path = media_path
        self._audio: Optional[AudioSegment] = None

    @property
    def audio(self) -> AudioSegment:
        if self._audio is None:
            self._audio = AudioSegment.from_file(self.media_path)
            logger.debug(
                "Decoded audio",
                extra={"path": str(self.media_path), "channels": self._audio.channels},
            )
        return self._audio

    def total_duration(self) -> float:
        return len(self.audio) / 1000.0

    def get_samples(self, max_samples: int) -> np.ndarray:
        audio = self.audio
        channels = audio.channels
        frames = np.array(audio.get_array_of_samples(), dtype=np.float64)
        frames = frames.reshape(-1, channels)
        full_scale = float(1 << (8 * audio.sample_width - 1))
        return reduce_to_peaks(frames / full_scale, max_samples)


def reduce_to_peaks(frames: np.ndarray, max_samples: int) -> np.ndarray:
    """Collapse ``(frames, channels)`` audio into ``max_samples`` max/min pairs."""

    frame_count = frames.shape[0]
    bucket_count = min(int(max_samples), frame_count)
    if bucket_count <= 0:
        return np.zeros((0, frames.shape[1] if frames.ndim == 2 else 1, 2))
    starts = np.linspace(0, frame_count, bucket_count, endpoint=False).astype(np.int64)
    starts = np.unique(starts)
    highs = np.maximum.reduceat(frames, starts, axis=0)
    lows = np.minimum.reduceat(frames, starts, axis=0)
    return np.stack([highs, lows], axis=-1)


def load_sample_source(media_path: Path) -> SampleSource:
    return PydubSampleSource(media_path)
