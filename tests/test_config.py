from __future__ import annotations

from pathlib import Path

import pytest

from tierseg.config import SegmenterConfig, load_segmenter_config


def test_missing_config_file_gives_defaults(tmp_path: Path) -> None:
    config = load_segmenter_config(tmp_path / "missing.yaml")

    assert config == SegmenterConfig()
    assert load_segmenter_config(None) == SegmenterConfig()


def test_config_values_are_read_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "segmenter.yaml"
    path.write_text(
        "segmenter:\n"
        "  min_segment_ms: 800\n"
        "  max_segment_ms: 12000\n"
        "  preferred_pause_ms: not-a-number\n"
        "annotation_files:\n"
        "  careful_speech_suffix: _C.wav\n"
    )

    config = load_segmenter_config(path)

    assert config.min_segment_ms == 800.0
    assert config.max_segment_ms == 12000.0
    assert config.preferred_pause_ms == 500.0
    assert config.annotation_files.careful_speech_suffix == "_C.wav"
    assert config.annotation_files.oral_translation_suffix == "_Translation.wav"


def test_inconsistent_limits_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "segmenter.yaml"
    path.write_text("segmenter:\n  min_segment_ms: 5000\n  max_segment_ms: 4000\n")

    with pytest.raises(ValueError):
        load_segmenter_config(path)
    with pytest.raises(ValueError):
        SegmenterConfig(min_segment_ms=0.0).validate()
