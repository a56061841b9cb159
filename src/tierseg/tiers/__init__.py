"""Ordered segment tiers and their per-segment side files."""

from .collection import TierCollection
from .segment import Segment
from .side_files import AnnotationFiles, SideFileReport, segment_file_name
from .time_tier import MINIMUM_SEGMENT_LENGTH_S, BoundaryModificationResult, TimeTier

__all__ = [
    "Segment",
    "TimeTier",
    "BoundaryModificationResult",
    "MINIMUM_SEGMENT_LENGTH_S",
    "AnnotationFiles",
    "SideFileReport",
    "segment_file_name",
    "TierCollection",
]
