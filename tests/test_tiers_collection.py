from __future__ import annotations

import json
from pathlib import Path

from tierseg.tiers import TierCollection


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    media = tmp_path / "session.wav"
    tiers = TierCollection(media)
    tier = tiers.new_time_tier()
    tiers.insert(0, tier)
    for end in (1.25, 4.0, 7.5):
        tier.append_segment(end)

    path = tiers.save()

    assert path == tmp_path / "session.wav.annotations.json"
    payload = json.loads(path.read_text())
    assert payload["media_file"] == "session.wav"
    assert payload["tiers"][0]["id"] == "Original"

    loaded = TierCollection.load(media)
    loaded_tier = loaded.time_tier()
    assert loaded_tier is not None
    assert [s.time_range for s in loaded_tier] == [(0.0, 1.25), (1.25, 4.0), (4.0, 7.5)]
    assert loaded_tier.segment_file_folder == tmp_path / "session.wav_Annotations"


def test_load_without_annotation_file_is_empty(tmp_path: Path) -> None:
    tiers = TierCollection.load(tmp_path / "fresh.wav")

    assert not tiers.has_annotation_file()
    assert tiers.time_tier() is None
    assert len(tiers) == 0
