from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_MIN_SEGMENT_MS = 500.0
DEFAULT_MAX_SEGMENT_MS = 30_000.0
DEFAULT_PREFERRED_PAUSE_MS = 500.0
DEFAULT_CLAMPING_FACTOR = 0.0001

DEFAULT_CAREFUL_SPEECH_SUFFIX = "_Careful.wav"
DEFAULT_ORAL_TRANSLATION_SUFFIX = "_Translation.wav"
DEFAULT_FOLDER_SUFFIX = "_Annotations"


@dataclass
class AnnotationFileConfig:
    careful_speech_suffix: str = DEFAULT_CAREFUL_SPEECH_SUFFIX
    oral_translation_suffix: str = DEFAULT_ORAL_TRANSLATION_SUFFIX
    folder_suffix: str = DEFAULT_FOLDER_SUFFIX


@dataclass
class SegmenterConfig:
    min_segment_ms: float = DEFAULT_MIN_SEGMENT_MS
    max_segment_ms: float = DEFAULT_MAX_SEGMENT_MS
    preferred_pause_ms: float = DEFAULT_PREFERRED_PAUSE_MS
    clamping_factor: float = DEFAULT_CLAMPING_FACTOR
    annotation_files: AnnotationFileConfig = field(default_factory=AnnotationFileConfig)

    def validate(self) -> None:
        if self.min_segment_ms <= 0:
            raise ValueError("min_segment_ms must be positive")
        if self.max_segment_ms <= self.min_segment_ms:
            raise ValueError("max_segment_ms must be greater than min_segment_ms")
        if self.preferred_pause_ms < 0:
            raise ValueError("preferred_pause_ms must not be negative")
        if self.clamping_factor < 0:
            raise ValueError("clamping_factor must not be negative")


def load_segmenter_config(path: Optional[Path]) -> SegmenterConfig:
    data = yaml.safe_load(path.read_text()) if path and path.exists() else {}
    if data is None:
        data = {}
    segmenter: Dict[str, Any] = data.get("segmenter") or {}
    files: Dict[str, Any] = data.get("annotation_files") or {}
    config = SegmenterConfig(
        min_segment_ms=_float_or(segmenter.get("min_segment_ms"), DEFAULT_MIN_SEGMENT_MS),
        max_segment_ms=_float_or(segmenter.get("max_segment_ms"), DEFAULT_MAX_SEGMENT_MS),
        preferred_pause_ms=_float_or(
            segmenter.get("preferred_pause_ms"), DEFAULT_PREFERRED_PAUSE_MS
        ),
        clamping_factor=_float_or(segmenter.get("clamping_factor"), DEFAULT_CLAMPING_FACTOR),
        annotation_files=AnnotationFileConfig(
            careful_speech_suffix=str(
                files.get("careful_speech_suffix", DEFAULT_CAREFUL_SPEECH_SUFFIX)
            ),
            oral_translation_suffix=str(
                files.get("oral_translation_suffix", DEFAULT_ORAL_TRANSLATION_SUFFIX)
            ),
            folder_suffix=str(files.get("folder_suffix", DEFAULT_FOLDER_SUFFIX)),
        ),
    )
    config.validate()
    return config


def _float_or(value: Any, default: float) -> float:
    try:
        return float(value) if value is not None else default
    except (TypeError, ValueError):
        return default
