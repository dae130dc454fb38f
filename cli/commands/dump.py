"""
Dump command - annotated hex dump of a patch resource or bank file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.commands.info import FB01, SCI0, detect_format
from cli.display.hex_view import (
    bank_regions,
    display_hex_dump,
    display_region_map,
    patch_regions,
    voice_offset,
    voice_record_offset,
)
from sci2fb.formats.sci0.reader import SCI0PatchReader
from sci2fb.models.voice import NibblizedPacket, VOICE_SIZE, VOICES_PER_BANK

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Patch resource or FB-01 bank to dump"),
    start: int = typer.Option(0, "--start", "-s", help="Start offset"),
    length: int = typer.Option(0, "--length", "-l", help="Number of bytes (0=all)"),
    voice: Optional[int] = typer.Option(
        None, "--voice", help="Show only one voice (1-48, or 1-96 for two-bank patches)"
    ),
    max_lines: int = typer.Option(32, "--max-lines", "-m", help="Maximum lines to show"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the region map"),
) -> None:
    """
    Annotated hex dump of a patch resource or FB-01 bank file.

    Bytes are color-coded by region (header, title, banks, label,
    voice packets).

    Examples:

        sci2fb dump PATCH.002

        sci2fb dump kq1.syx --voice 3

        sci2fb dump kq1.syx --start 73 --length 64
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    kind = detect_format(file)

    if kind == FB01:
        regions = bank_regions()
        title = "FB-01 Bank Hex Dump"
        voice_count = VOICES_PER_BANK
    elif kind == SCI0:
        title_length = data[1]
        double = len(data) - title_length == SCI0PatchReader.DOUBLE_BANK_SIZE
        regions = patch_regions(title_length, double)
        title = "SCI0 Patch Hex Dump"
        voice_count = VOICES_PER_BANK * (2 if double else 1)
    else:
        regions = None
        title = "Hex Dump"
        voice_count = 0

    if voice is not None:
        if not 1 <= voice <= voice_count:
            console.print(f"[red]Error: Voice must be 1-{voice_count} for this file[/red]")
            raise typer.Exit(1)
        if kind == FB01:
            start, length = voice_offset(voice - 1), NibblizedPacket.SIZE
        else:
            start, length = voice_record_offset(data[1], voice - 1), VOICE_SIZE
        title = f"{title} - Voice {voice}"

    if not 0 <= start < len(data):
        console.print(f"[red]Error: Start offset out of range (file is {len(data)} bytes)[/red]")
        raise typer.Exit(1)

    if length == 0:
        length = len(data) - start

    end = min(start + length, len(data))

    if regions and not no_legend and voice is None:
        display_region_map(regions)
        console.print()

    display_hex_dump(
        data[start:end],
        title=title,
        start_offset=start,
        max_lines=max_lines,
        regions=regions,
    )


if __name__ == "__main__":
    app()
