"""
Info command - display patch resource or bank information.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display.tables import display_bank_info, display_patch_info
from sci2fb.errors import ConversionError
from sci2fb.formats.fb01.reader import FB01BankReader
from sci2fb.formats.sci0.reader import SCI0PatchReader

console = Console()
app = typer.Typer()

SCI0 = "sci0"
FB01 = "fb01"


def detect_format(filepath: Path) -> Optional[str]:
    """Detect whether a file is an SCI0 patch resource or an FB-01 bank."""
    if FB01BankReader.can_read(filepath):
        return FB01
    if SCI0PatchReader.can_read(filepath):
        return SCI0
    return None


@app.command()
def info(
    file: Path = typer.Argument(..., help="SCI0 patch resource or FB-01 bank (.syx)"),
    voices: bool = typer.Option(False, "--voices", "-V", help="List every voice"),
) -> None:
    """
    Display information about a patch resource or FB-01 bank file.

    For an SCI0 patch resource: title, bank count and voice count.
    For an FB-01 bank: bank id, bank name and checksum status.

    Examples:

        sci2fb info PATCH.002

        sci2fb info kq1.syx --voices
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    kind = detect_format(file)

    try:
        if kind == FB01:
            bank = FB01BankReader.read(file)
            display_bank_info(file, bank, show_voices=voices)
            if not bank.is_valid:
                raise typer.Exit(1)

        elif kind == SCI0:
            reader = SCI0PatchReader()
            payload = reader.parse_file(file)
            display_patch_info(file, reader, payload, show_voices=voices)

        else:
            # Parse anyway so the user gets the specific reason
            SCI0PatchReader().parse_file(file)
            console.print(f"[red]Error: Unrecognized file format: {file}[/red]")
            raise typer.Exit(1)

    except ConversionError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
