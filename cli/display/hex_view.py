"""
Hex dump display utilities.
"""

from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from sci2fb.formats.fb01.writer import FB01BankWriter
from sci2fb.formats.sci0.reader import SCI0PatchReader
from sci2fb.models.voice import NibblizedPacket, VOICE_SIZE, VOICES_PER_BANK

console = Console()


@dataclass
class Region:
    """A named byte range within a file."""

    start: int
    end: int  # exclusive
    name: str
    description: str
    color: str

    @property
    def length(self) -> int:
        return self.end - self.start


def patch_regions(title_length: int, double: bool) -> List[Region]:
    """Region map of an SCI0 patch resource."""
    bank_a = SCI0PatchReader.HEADER_SIZE + title_length
    sep = bank_a + SCI0PatchReader.BANK_SIZE

    regions = [
        Region(0, 1, "ID", "Patch resource identifier (0x89)", "red"),
        Region(1, 2, "TITLE LEN", "Title string length", "yellow"),
    ]
    if title_length:
        regions.append(Region(2, bank_a, "TITLE", "Title string", "cyan"))
    regions.append(Region(bank_a, sep, "BANK A", "Voices 1-48 (64 bytes each)", "green"))
    if double:
        regions.append(Region(sep, sep + 2, "SEPARATOR", "Bank separator (AB CD)", "magenta"))
        regions.append(
            Region(sep + 2, sep + 2 + SCI0PatchReader.BANK_SIZE, "BANK B", "Voices 49-96", "blue")
        )
    return regions


def bank_regions() -> List[Region]:
    """Region map of an FB-01 bank SysEx file."""
    label = FB01BankWriter.HEADER_SIZE + len(FB01BankWriter.INFO_SIZE)
    voices = label + FB01BankWriter.LABEL_BLOCK_SIZE
    end = voices + NibblizedPacket.SIZE * VOICES_PER_BANK

    return [
        Region(0, FB01BankWriter.HEADER_SIZE, "HEADER", "F0 43 75 00 00 00 <bank>", "red"),
        Region(FB01BankWriter.HEADER_SIZE, label, "INFO SIZE", "Info packet size (00 40)", "yellow"),
        Region(label, voices, "LABEL", "Nibblized bank name + checksum", "cyan"),
        Region(voices, end, "VOICES", f"48 packets x {NibblizedPacket.SIZE} bytes", "green"),
        Region(end, end + 1, "EOX", "End of exclusive (F7)", "red"),
    ]


def find_region(regions: List[Region], offset: int) -> Optional[Region]:
    for region in regions:
        if region.start <= offset < region.end:
            return region
    return None


def display_region_map(regions: List[Region], title: str = "File Structure") -> None:
    """Display a table of file regions."""
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("Region", width=10)
    table.add_column("Start", style="dim", justify="right")
    table.add_column("End", style="dim", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Description")

    for region in regions:
        table.add_row(
            f"[{region.color}]{region.name}[/{region.color}]",
            f"0x{region.start:04X}",
            f"0x{region.end - 1:04X}",
            str(region.length),
            region.description,
        )

    console.print(table)


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
    regions: Optional[List[Region]] = None,
) -> None:
    """
    Display formatted hex dump with Rich.

    Args:
        data: Bytes to show (already sliced from start_offset)
        title: Panel title
        start_offset: File offset of data[0]
        bytes_per_line: Bytes per row
        max_lines: Maximum rows to show
        regions: Optional region map used to color bytes
    """
    lines = []
    end = min(len(data), max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        # Hex part
        hex_parts = []
        for i, b in enumerate(chunk):
            if i == 8:
                hex_parts.append("")  # Extra space at midpoint
            region = find_region(regions, start_offset + offset + i) if regions else None
            if region:
                hex_parts.append(f"[{region.color}]{b:02X}[/{region.color}]")
            else:
                hex_parts.append(f"{b:02X}")
        hex_str = " ".join(hex_parts)
        padding = " " * (3 * (bytes_per_line - len(chunk)) + (1 if len(chunk) <= 8 else 0))

        # ASCII part
        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        ascii_str = ascii_str.replace("[", "\\[")

        # Address
        addr = start_offset + offset

        lines.append(f"[dim]{addr:08X}[/dim]  {hex_str}{padding}  [cyan]{ascii_str}[/cyan]")

    if len(data) > end:
        remaining = len(data) - end
        lines.append(f"[dim]... {remaining} more bytes ...[/dim]")

    content = "\n".join(lines)
    console.print(Panel(content, title=title, border_style="blue", expand=False))


def voice_offset(index: int) -> int:
    """File offset of a voice packet within an FB-01 bank file."""
    return (
        FB01BankWriter.HEADER_SIZE
        + len(FB01BankWriter.INFO_SIZE)
        + FB01BankWriter.LABEL_BLOCK_SIZE
        + index * NibblizedPacket.SIZE
    )


def voice_record_offset(title_length: int, index: int) -> int:
    """File offset of a voice record within an SCI0 patch resource."""
    offset = SCI0PatchReader.HEADER_SIZE + title_length + index * VOICE_SIZE
    if index >= VOICES_PER_BANK:
        offset += len(SCI0PatchReader.SEPARATOR)
    return offset
