"""
Convert command - SCI0 patch resource to FB-01 bank SysEx files.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from sci2fb.converters.sci0_to_fb01 import SCI0ToFB01Converter
from sci2fb.errors import ConversionError
from sci2fb.formats.sci0.reader import SCI0PatchReader
from sci2fb.utils.validation import bank_name_from_path

console = Console()
app = typer.Typer()

# Tried in order when the source path does not exist and has no suffix
PATCH_SUFFIXES = (".002", ".pat")
BANK_SUFFIX = ".syx"


def resolve_source(source: Path) -> Optional[Path]:
    """
    Find the patch resource, probing known suffixes when needed.

    Args:
        source: Path as given on the command line

    Returns:
        Existing path, or None if nothing was found
    """
    if source.is_file():
        return source

    if source.suffix:
        return None

    for suffix in PATCH_SUFFIXES:
        for candidate in (source.with_suffix(suffix), source.with_suffix(suffix.upper())):
            if candidate.is_file():
                return candidate

    return None


def with_bank_suffix(path: Path) -> Path:
    """Append .syx to an output path that has no suffix."""
    return path if path.suffix else path.with_suffix(BANK_SUFFIX)


def resolve_outputs(
    source: Path, bank_count: int, bank1: Optional[Path], bank2: Optional[Path]
) -> List[Path]:
    """
    Work out the output paths for a conversion.

    Without explicit outputs, files are placed next to the source:
    <stem>.syx for one bank, <stem>1.syx and <stem>2.syx for two.

    Raises:
        typer.BadParameter: If the given outputs do not match the bank count,
            or both banks would be written to the same file
    """
    if bank1 is None and bank2 is None:
        if bank_count == 1:
            return [source.with_name(source.stem + BANK_SUFFIX)]
        return [source.with_name(f"{source.stem}{n}{BANK_SUFFIX}") for n in (1, 2)]

    if bank_count == 1:
        if bank2 is not None:
            raise typer.BadParameter(
                "Patch resource holds a single bank; give only one output file"
            )
        return [with_bank_suffix(bank1)]

    if bank1 is None or bank2 is None:
        raise typer.BadParameter("Patch resource holds two banks; give two output files")

    outputs = [with_bank_suffix(bank1), with_bank_suffix(bank2)]
    if outputs[0].resolve() == outputs[1].resolve():
        raise typer.BadParameter(f"Bank A and bank B would both be written to {outputs[0]}")

    return outputs


def confirm_overwrite(outputs: List[Path]) -> None:
    """Ask before replacing existing files; abort if the user declines."""
    for output in outputs:
        if output.exists():
            if not typer.confirm(f"{output} already exists. Overwrite?", default=False):
                console.print("[yellow]Aborting operation...[/yellow]")
                raise typer.Exit(1)


@app.command()
def convert(
    source: Path = typer.Argument(..., help="SCI0 patch resource (e.g. PATCH.002)"),
    bank1: Optional[Path] = typer.Argument(None, help="Output bank file (bank A)"),
    bank2: Optional[Path] = typer.Argument(
        None, help="Output file for bank B (two-bank resources only)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite without asking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """
    Convert an SCI0 FB-01 patch resource into FB-01 bank SysEx files.

    A one-bank resource (48 voices) produces one .syx file; a two-bank
    resource (96 voices) produces two. Bank names shown on the FB-01 are
    taken from the output file names.

    Examples:

        sci2fb convert PATCH.002

        sci2fb convert PATCH.002 kq1.syx kq2.syx

        sci2fb convert PATCH sq3 --force
    """
    source_path = resolve_source(source)
    if source_path is None:
        console.print(f"[red]Error: Source file not found: {source}[/red]")
        raise typer.Exit(1)

    with open(source_path, "rb") as f:
        data = f.read()

    reader = SCI0PatchReader()
    try:
        payload = reader.parse_bytes(data)
    except ConversionError as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if verbose:
        console.print("[dim]SCI patch resource header detected[/dim]")
        if reader.title:
            console.print(f"[dim]Title: {reader.title_text}[/dim]")
        console.print(f"[dim]Voices: {payload.voice_count}[/dim]")

    outputs = resolve_outputs(source_path, payload.bank_count.value, bank1, bank2)

    if not force:
        confirm_overwrite(outputs)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        task = progress.add_task("Converting SCI0 patch to FB-01 banks...", total=None)

        try:
            converter = SCI0ToFB01Converter()
            banks = converter.convert_bytes(data, [bank_name_from_path(p) for p in outputs])

            for output_path, bank_data in zip(outputs, banks):
                output_path.parent.mkdir(parents=True, exist_ok=True)
                with open(output_path, "wb") as f:
                    f.write(bank_data)

            progress.update(task, description="Done!")

        except (ConversionError, OSError) as e:
            console.print(f"[red]Error: {e}[/red]")
            if verbose:
                console.print_exception()
            raise typer.Exit(1)

    for letter, output_path, bank_data in zip("AB", outputs, banks):
        console.print(f"[green]Converted:[/green] {source_path} -> {output_path} (bank {letter})")
        console.print(f"[dim]Output size: {len(bank_data)} bytes[/dim]")

    console.print("[green]FB-01 SysEx banks created successfully![/green]")


if __name__ == "__main__":
    app()
