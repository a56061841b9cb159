from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from tierseg.audio import load_sample_source
from tierseg.config import load_segmenter_config
from tierseg.segmentation import AutoSegmenter, compute_breakpoints

console = Console()
app = typer.Typer(help="Automatic audio segmentation CLI")


@app.command()
def breaks(
    audio_path: Path = typer.Argument(..., exists=True, readable=True),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Segmenter config yaml"),
) -> None:
    """Print the breakpoints the segmenter would use."""

    segmenter_config = load_segmenter_config(config)
    source = load_sample_source(audio_path)
    table = Table(title=audio_path.name)
    table.add_column("#", justify="right")
    table.add_column("start_s", justify="right")
    table.add_column("end_s", justify="right")
    start = 0.0
    for idx, end in enumerate(compute_breakpoints(source, segmenter_config), start=1):
        table.add_row(str(idx), f"{start:.3f}", f"{end:.3f}")
        start = end
    if table.row_count:
        console.print(table)
    else:
        console.print("No breakpoints: recording is empty", style="yellow")


@app.command()
def segment(
    audio_path: Path = typer.Argument(..., exists=True, readable=True),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Segmenter config yaml"),
    force: bool = typer.Option(False, "--force", "-f", help="Replace an existing segmentation"),
) -> None:
    """Segment a recording and save its time tier."""

    segmenter = AutoSegmenter(audio_path, load_segmenter_config(config))
    annotation_path = segmenter.run(force=force)
    console.print(f"Annotation file at {annotation_path}", style="cyan")


def run() -> None:
    app()
