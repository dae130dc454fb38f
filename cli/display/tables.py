"""
Rich table displays for patch resource and bank information.
"""

from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from sci2fb.formats.sci0.reader import SCI0PatchReader
from sci2fb.models.bank import FB01Bank
from sci2fb.models.voice import VoicePayload, VOICES_PER_BANK


console = Console()


def preview(voice: bytes, length: int = 8) -> str:
    """Hex preview of the first bytes of a voice record."""
    return " ".join(f"{b:02X}" for b in voice[:length])


def display_patch_info(
    filepath: Path, reader: SCI0PatchReader, payload: VoicePayload, show_voices: bool = False
) -> None:
    """Display SCI0 patch resource information with Rich formatting."""
    double = payload.bank_count.is_double

    content = f"""[bold]File:[/bold] {filepath}
[bold]Format:[/bold] SCI0 FB-01 patch resource
[bold]Title:[/bold] {reader.title_text or "[dim]none[/dim]"} ({reader.title_length} bytes)
[bold]Banks:[/bold] {payload.bank_count.value}
[bold]Voices:[/bold] {payload.voice_count}
[bold]Separator:[/bold] {"[green]AB CD[/green]" if double else "[dim]n/a[/dim]"}
[bold]File Size:[/bold] {filepath.stat().st_size} bytes"""

    console.print(
        Panel(
            content,
            title="[bold blue]SCI0 Patch Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    if show_voices:
        table = Table(title="Voices", box=box.ROUNDED, show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim", width=4, justify="right")
        table.add_column("Bank", width=5)
        table.add_column("Data Preview", width=26)

        for i, voice in enumerate(payload):
            bank = "A" if i < VOICES_PER_BANK else "B"
            table.add_row(str(i % VOICES_PER_BANK + 1), bank, preview(voice))

        console.print(table)


def display_bank_info(filepath: Path, bank: FB01Bank, show_voices: bool = False) -> None:
    """Display FB-01 bank information with Rich formatting."""
    if bank.is_valid:
        status = "[green]Valid[/green]"
    else:
        status = f"[red]{len(bank.checksum_errors)} checksum error(s)[/red]"

    content = f"""[bold]File:[/bold] {filepath}
[bold]Format:[/bold] FB-01 voice bank SysEx
[bold]Bank:[/bold] {bank.bank_letter} (id 0x{bank.bank_id:02X})
[bold]Name:[/bold] {bank.label.name!r}
[bold]Voices:[/bold] {len(bank.voices)}
[bold]Status:[/bold] {status}
[bold]File Size:[/bold] {filepath.stat().st_size} bytes"""

    console.print(
        Panel(
            content,
            title="[bold blue]FB-01 Bank Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    if show_voices or not bank.is_valid:
        table = Table(title="Packets", box=box.ROUNDED, show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim", width=6, justify="right")
        table.add_column("Checksum", width=9)
        table.add_column("Data Preview", width=26)

        label_ok = -1 not in bank.checksum_errors
        table.add_row(
            "label",
            "[green]OK[/green]" if label_ok else "[red]BAD[/red]",
            bank.label.name,
        )

        for i, voice in enumerate(bank.voices):
            if not show_voices and i not in bank.checksum_errors:
                continue
            checksum = "[red]BAD[/red]" if i in bank.checksum_errors else "[green]OK[/green]"
            table.add_row(str(i + 1), checksum, preview(voice))

        console.print(table)
