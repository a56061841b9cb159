from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from tierseg.tiers.segment import Segment
from tierseg.tiers.side_files import AnnotationFiles, SideFileReport
from tierseg.utils import get_logger

logger = get_logger(__name__)

DEFAULT_TIER_ID = "Original"
MINIMUM_SEGMENT_LENGTH_S = 0.5


class BoundaryModificationResult(Enum):
    SUCCESS = "success"
    SEGMENT_NOT_FOUND = "segment_not_found"
    SEGMENT_WILL_BE_TOO_SHORT = "segment_will_be_too_short"
    NEXT_SEGMENT_WILL_BE_TOO_SHORT = "next_segment_will_be_too_short"


ChangeListener = Callable[["TimeTier"], None]


def ignore_change(tier: "TimeTier") -> None:
    return None


class TimeTier:
    """Ordered, gap-free segments over one media file.

    Segments are kept in time order by the operations below; each edit either
    succeeds or returns a ``BoundaryModificationResult`` and leaves every
    boundary untouched. Side files follow the boundaries they are named after.
    """

    def __init__(
        self,
        media_path: Path | str,
        tier_id: str = DEFAULT_TIER_ID,
        *,
        annotation_files: Optional[AnnotationFiles] = None,
        on_change: ChangeListener = ignore_change,
    ) -> None:
        self.tier_id = tier_id
        self.media_path = Path(media_path)
        self.annotation_files = annotation_files or AnnotationFiles.for_media(self.media_path)
        self.on_change = on_change
        self.segments: List[Segment] = []
        self.side_file_failures: List[Path] = []

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    @property
    def segment_file_folder(self) -> Path:
        return self.annotation_files.folder

    def careful_speech_path(self, segment: Segment) -> Path:
        return self.annotation_files.careful_speech_path(segment.start, segment.end)

    def oral_translation_path(self, segment: Segment) -> Path:
        return self.annotation_files.oral_translation_path(segment.start, segment.end)

    def boundaries(self) -> List[float]:
        return [segment.end for segment in self.segments]

    # lookups

    def index_of(self, segment: Optional[Segment]) -> int:
        if segment is None:
            return -1
        for idx, candidate in enumerate(self.segments):
            if candidate.time_range == segment.time_range:
                return idx
        return -1

    def segment_having_end_boundary(self, end: float) -> Optional[Segment]:
        return next((seg for seg in self.segments if seg.end == end), None)

    def segment_enclosing_time(self, time_s: float) -> Optional[Segment]:
        return next((seg for seg in self.segments if seg.contains(time_s)), None)

    # adding and removing

    def add_segment(self, start: float, end: float) -> Segment:
        if self.segments and start < self.segments[-1].end:
            raise ValueError(
                f"segment starting at {start} overlaps the last segment ending at "
                f"{self.segments[-1].end}"
            )
        segment = Segment(start, end, tier=self)
        self.segments.append(segment)
        self._notify()
        return segment

    def append_segment(self, end: float) -> Segment:
        start = self.segments[-1].end if self.segments else 0.0
        return self.add_segment(start, end)

    def clear(self) -> None:
        self.segments.clear()
        self._notify()

    def remove_segment(self, index: int) -> bool:
        if index < 0 or index >= len(self.segments):
            return False
        removed = self.segments[index]
        if index < len(self.segments) - 1:
            following = self.segments[index + 1]
            self._track(
                self.annotation_files.rename(
                    following.start, following.end, removed.start, following.end
                )
            )
            following.start = removed.start
        self._track(self.annotation_files.delete(removed.start, removed.end))
        del self.segments[index]
        self._notify()
        return True

    def remove_segment_having_end_boundary(self, end: float) -> bool:
        segment = self.segment_having_end_boundary(end)
        return segment is not None and self.remove_segment(self.index_of(segment))

    # boundary edits

    def change_end_boundary_at(
        self, old_end: float, new_end: float
    ) -> BoundaryModificationResult:
        segment = self.segment_having_end_boundary(old_end)
        if segment is None:
            return BoundaryModificationResult.SEGMENT_NOT_FOUND
        return self.change_end_boundary(segment, new_end)

    def change_end_boundary(
        self, segment: Segment, new_end: float
    ) -> BoundaryModificationResult:
        index = self.index_of(segment)
        if index < 0:
            return BoundaryModificationResult.SEGMENT_NOT_FOUND
        current = self.segments[index]
        if new_end - current.start < MINIMUM_SEGMENT_LENGTH_S:
            return BoundaryModificationResult.SEGMENT_WILL_BE_TOO_SHORT

        following = self.segments[index + 1] if index < len(self.segments) - 1 else None
        if following is not None:
            if following.end - new_end < MINIMUM_SEGMENT_LENGTH_S:
                return BoundaryModificationResult.NEXT_SEGMENT_WILL_BE_TOO_SHORT
            self._track(
                self.annotation_files.rename(
                    following.start, following.end, new_end, following.end
                )
            )
            following.start = new_end

        self._track(
            self.annotation_files.rename(current.start, current.end, current.start, new_end)
        )
        current.end = new_end
        self._notify()
        return BoundaryModificationResult.SUCCESS

    def insert_boundary(self, new_boundary: float) -> BoundaryModificationResult:
        splitting = self.segment_enclosing_time(new_boundary)

        if splitting is None:
            start = self.segments[-1].end if self.segments else 0.0
            if new_boundary - start < MINIMUM_SEGMENT_LENGTH_S:
                return BoundaryModificationResult.SEGMENT_WILL_BE_TOO_SHORT
            self.add_segment(start, new_boundary)
            return BoundaryModificationResult.SUCCESS

        if new_boundary - splitting.start < MINIMUM_SEGMENT_LENGTH_S:
            return BoundaryModificationResult.SEGMENT_WILL_BE_TOO_SHORT
        if splitting.end - new_boundary < MINIMUM_SEGMENT_LENGTH_S:
            return BoundaryModificationResult.NEXT_SEGMENT_WILL_BE_TOO_SHORT

        self._track(
            self.annotation_files.rename(
                splitting.start, splitting.end, splitting.start, new_boundary
            )
        )
        old_end = splitting.end
        splitting.end = new_boundary
        self.segments.insert(
            self.index_of(splitting) + 1, Segment(new_boundary, old_end, tier=self)
        )
        self._notify()
        return BoundaryModificationResult.SUCCESS

    # feasibility of interactive boundary moves

    def can_move_left(self, boundary: float, seconds: float) -> bool:
        new_boundary = boundary - seconds
        segment = self.segment_enclosing_time(boundary)
        return new_boundary > 0 and (
            segment is None or new_boundary - segment.start >= MINIMUM_SEGMENT_LENGTH_S
        )

    def can_move_right(self, boundary: float, seconds: float, limit: float) -> bool:
        new_boundary = boundary + seconds
        if new_boundary <= 0 or new_boundary > limit:
            return False

        segment = self.segment_having_end_boundary(boundary)
        if segment is not None:
            index = self.index_of(segment)
            return (
                index == len(self.segments) - 1
                or self.segments[index + 1].end - new_boundary >= MINIMUM_SEGMENT_LENGTH_S
            )

        segment = self.segment_enclosing_time(boundary)
        return segment is None or segment.end - new_boundary >= MINIMUM_SEGMENT_LENGTH_S

    def _track(self, report: SideFileReport) -> SideFileReport:
        self.side_file_failures.extend(report.failed)
        return report

    def _notify(self) -> None:
        self.on_change(self)
