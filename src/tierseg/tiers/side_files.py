from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Tuple

from tierseg.config import AnnotationFileConfig
from tierseg.utils import get_logger

logger = get_logger(__name__)

BackupAction = Callable[[Path], None]


def no_backup(path: Path) -> None:
    return None


def format_boundary(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def segment_file_name(start: float, end: float, suffix: str) -> str:
    return f"{format_boundary(start)}_to_{format_boundary(end)}{suffix}"


@dataclass
class SideFileReport:
    renamed: List[Tuple[Path, Path]] = field(default_factory=list)
    deleted: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def extend(self, other: "SideFileReport") -> None:
        self.renamed.extend(other.renamed)
        self.deleted.extend(other.deleted)
        self.failed.extend(other.failed)


class AnnotationFiles:
    """Careful-speech and oral-translation recordings kept beside one media file.

    Files are named from the boundaries of the segment they annotate, so every
    boundary change renames them and every removed segment deletes them. Both
    operations are best effort: an ``OSError`` on one file is logged and
    recorded in the returned report, and the remaining files are still handled.
    A rename never replaces a file already at the target name.
    The ``backup`` callable sees each existing file before it is renamed or
    deleted.
    """

    def __init__(
        self,
        folder: Path,
        *,
        careful_speech_suffix: str,
        oral_translation_suffix: str,
        backup: BackupAction = no_backup,
    ) -> None:
        self.folder = folder
        self.careful_speech_suffix = careful_speech_suffix
        self.oral_translation_suffix = oral_translation_suffix
        self.backup = backup

    @classmethod
    def for_media(
        cls,
        media_path: Path,
        config: AnnotationFileConfig | None = None,
        *,
        backup: BackupAction = no_backup,
    ) -> "AnnotationFiles":
        config = config or AnnotationFileConfig()
        return cls(
            Path(f"{media_path}{config.folder_suffix}"),
            careful_speech_suffix=config.careful_speech_suffix,
            oral_translation_suffix=config.oral_translation_suffix,
            backup=backup,
        )

    @property
    def suffixes(self) -> Tuple[str, str]:
        return (self.careful_speech_suffix, self.oral_translation_suffix)

    def careful_speech_path(self, start: float, end: float) -> Path:
        return self.folder / segment_file_name(start, end, self.careful_speech_suffix)

    def oral_translation_path(self, start: float, end: float) -> Path:
        return self.folder / segment_file_name(start, end, self.oral_translation_suffix)

    def rename(
        self, old_start: float, old_end: float, new_start: float, new_end: float
    ) -> SideFileReport:
        report = SideFileReport()
        if (old_start, old_end) == (new_start, new_end):
            return report
        for suffix in self.suffixes:
            source = self.folder / segment_file_name(old_start, old_end, suffix)
            target = self.folder / segment_file_name(new_start, new_end, suffix)
            try:
                if not source.exists():
                    continue
                if target.exists():
                    raise FileExistsError(f"segment file already exists: {target}")
                self.backup(source)
                source.rename(target)
            except OSError as exc:
                logger.warning(
                    "Could not rename segment file",
                    extra={"path": str(source), "target": str(target), "error": str(exc)},
                )
                report.failed.append(source)
                continue
            report.renamed.append((source, target))
        return report

    def delete(self, start: float, end: float) -> SideFileReport:
        report = SideFileReport()
        for suffix in self.suffixes:
            path = self.folder / segment_file_name(start, end, suffix)
            try:
                if not path.exists():
                    continue
                self.backup(path)
                path.unlink()
            except OSError as exc:
                logger.warning(
                    "Could not delete segment file",
                    extra={"path": str(path), "error": str(exc)},
                )
                report.failed.append(path)
                continue
            report.deleted.append(path)
        return report
