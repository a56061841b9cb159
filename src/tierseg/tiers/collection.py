from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from tierseg.config import AnnotationFileConfig
from tierseg.tiers.side_files import AnnotationFiles, BackupAction, no_backup
from tierseg.tiers.time_tier import TimeTier
from tierseg.utils import get_logger

logger = get_logger(__name__)

ANNOTATION_FILE_SUFFIX = ".annotations.json"


class TierCollection:
    """The tiers annotating one media file, saved beside it as JSON."""

    def __init__(
        self,
        media_path: Path,
        *,
        files_config: Optional[AnnotationFileConfig] = None,
        backup: BackupAction = no_backup,
    ) -> None:
        self.media_path = Path(media_path)
        self.files_config = files_config or AnnotationFileConfig()
        self.backup = backup
        self.tiers: List[TimeTier] = []

    def __iter__(self) -> Iterator[TimeTier]:
        return iter(self.tiers)

    def __len__(self) -> int:
        return len(self.tiers)

    @property
    def annotation_path(self) -> Path:
        return Path(f"{self.media_path}{ANNOTATION_FILE_SUFFIX}")

    def has_annotation_file(self) -> bool:
        return self.annotation_path.exists()

    def time_tier(self) -> Optional[TimeTier]:
        return next(iter(self.tiers), None)

    def new_time_tier(self, tier_id: Optional[str] = None) -> TimeTier:
        files = AnnotationFiles.for_media(self.media_path, self.files_config, backup=self.backup)
        if tier_id is None:
            return TimeTier(self.media_path, annotation_files=files)
        return TimeTier(self.media_path, tier_id, annotation_files=files)

    def insert(self, index: int, tier: TimeTier) -> None:
        self.tiers.insert(index, tier)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "media_file": self.media_path.name,
            "tiers": [
                {
                    "id": tier.tier_id,
                    "segments": [[segment.start, segment.end] for segment in tier],
                }
                for tier in self.tiers
            ],
        }

    def save(self) -> Path:
        path = self.annotation_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_payload(), indent=2))
        logger.info(
            "Saved annotation file",
            extra={"path": str(path), "tiers": len(self.tiers)},
        )
        return path

    @classmethod
    def load(
        cls,
        media_path: Path,
        *,
        files_config: Optional[AnnotationFileConfig] = None,
        backup: BackupAction = no_backup,
    ) -> "TierCollection":
        collection = cls(media_path, files_config=files_config, backup=backup)
        if not collection.has_annotation_file():
            return collection
        payload = json.loads(collection.annotation_path.read_text())
        for item in payload.get("tiers", []):
            tier = collection.new_time_tier(item.get("id") or None)
            for start, end in item.get("segments", []):
                tier.add_segment(float(start), float(end))
            collection.tiers.append(tier)
        return collection
