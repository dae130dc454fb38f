"""
Send command - transmit an FB-01 bank file via MIDI.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from sci2fb.errors import ConversionError
from sci2fb.midi import list_output_ports, send_bank

console = Console()
app = typer.Typer()


@app.command()
def send(
    file: Optional[Path] = typer.Argument(None, help="FB-01 bank file (.syx)"),
    port: Optional[str] = typer.Option(
        None, "--port", "-p", help="MIDI output port (name or part of it)"
    ),
    list_ports: bool = typer.Option(False, "--list", "-l", help="List MIDI output ports"),
) -> None:
    """
    Send an FB-01 bank file to the FB-01 over MIDI.

    The bank is validated (structure and every checksum) before sending;
    the FB-01 silently ignores banks with bad checksums.

    Examples:

        sci2fb send kq1.syx

        sci2fb send kq1.syx --port "USB MIDI"

        sci2fb send --list
    """
    if list_ports:
        ports = list_output_ports()
        if not ports:
            console.print("[yellow]No MIDI output ports found[/yellow]")
        for name in ports:
            console.print(f"  - {name}")
        return

    if file is None:
        console.print("[red]Error: No bank file given[/red]")
        raise typer.Exit(1)

    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        bank = send_bank(file, port)
    except ConversionError as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print("Aborting transmission. Fix errors before sending.")
        raise typer.Exit(1)
    except IOError as e:
        console.print(f"[red]Error: {e}[/red]")
        ports = list_output_ports()
        if ports:
            console.print("Available ports:")
            for name in ports:
                console.print(f"  - {name}")
        raise typer.Exit(1)

    console.print(
        f"[green]Sent:[/green] {file} (bank {bank.bank_letter}, \"{bank.name}\", "
        f"{len(bank.voices)} voices)"
    )


if __name__ == "__main__":
    app()
