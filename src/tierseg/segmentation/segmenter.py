from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional

from tierseg.audio import SampleSource, load_sample_source
from tierseg.config import SegmenterConfig
from tierseg.segmentation.scoring import raw_scores
from tierseg.segmentation.search import SearchParams, iter_sample_breakpoints
from tierseg.tiers import TierCollection
from tierseg.tiers.side_files import BackupAction, no_backup
from tierseg.utils import get_logger

logger = get_logger(__name__)


def search_params(config: SegmenterConfig, ms_per_sample: float) -> SearchParams:
    if ms_per_sample <= 0:
        raise ValueError("ms_per_sample must be positive")
    config.validate()
    return SearchParams(
        min_samples=int(config.min_segment_ms / ms_per_sample),
        max_samples=max(1, int(config.max_segment_ms / ms_per_sample)),
        pause_window=int(config.preferred_pause_ms / ms_per_sample),
        clamping_factor=config.clamping_factor,
    )


def compute_breakpoints(
    source: SampleSource, config: Optional[SegmenterConfig] = None
) -> Iterator[float]:
    """Yield segment end times in seconds, the last one being the total duration.

    Every call starts over from the beginning of the recording.
    """

    config = config or SegmenterConfig()
    duration_s = source.total_duration()
    requested = int(duration_s * 1000)
    if requested <= 0:
        return

    samples = source.get_samples(requested)
    sample_count = samples.shape[0]
    if sample_count == 0:
        return

    ms_per_sample = duration_s * 1000 / sample_count
    params = search_params(config, ms_per_sample)
    logger.debug(
        "Searching for breakpoints",
        extra={"samples": sample_count, "ms_per_sample": ms_per_sample, "params": params},
    )

    last_break = 0
    for sample_break in iter_sample_breakpoints(raw_scores(samples), params):
        last_break = sample_break
        yield sample_break * ms_per_sample / 1000.0

    if last_break < sample_count:
        yield duration_s


def segment_tiers(
    tiers: TierCollection,
    source: SampleSource,
    config: Optional[SegmenterConfig] = None,
    *,
    force: bool = False,
) -> Path:
    """Fill the collection's time tier with automatic segments and save it."""

    if tiers.has_annotation_file() and not force:
        logger.info(
            "Annotation file exists, skipping segmentation",
            extra={"path": str(tiers.annotation_path)},
        )
        return tiers.annotation_path

    time_tier = tiers.time_tier()
    if time_tier is None:
        time_tier = tiers.new_time_tier()
        tiers.insert(0, time_tier)
    elif force:
        time_tier.clear()

    for breakpoint_s in compute_breakpoints(source, config):
        time_tier.append_segment(breakpoint_s)

    logger.info(
        "Segmented media",
        extra={"media": str(tiers.media_path), "segments": len(time_tier)},
    )
    return tiers.save()


class AutoSegmenter:
    def __init__(
        self,
        media_path: Path,
        config: Optional[SegmenterConfig] = None,
        *,
        source: Optional[SampleSource] = None,
        backup: BackupAction = no_backup,
    ) -> None:
        self.media_path = media_path
        self.config = config or SegmenterConfig()
        self.backup = backup
        self._source = source

    @property
    def source(self) -> SampleSource:
        if self._source is None:
            self._source = load_sample_source(self.media_path)
        return self._source

    def breakpoints(self) -> List[float]:
        return list(compute_breakpoints(self.source, self.config))

    def run(self, *, force: bool = False) -> Path:
        tiers = TierCollection.load(
            self.media_path,
            files_config=self.config.annotation_files,
            backup=self.backup,
        )
        return segment_tiers(tiers, self.source, self.config, force=force)
