"""
Name validation utilities for FB-01 bank labels.
"""

from pathlib import Path
from typing import Union

from sci2fb.errors import LabelError


# Characters the FB-01 display can show; anything else becomes '?'
PRINTABLE_ASCII = set(chr(c) for c in range(0x20, 0x7F))


def bank_name_from_path(path: Union[str, Path]) -> str:
    """
    Derive a bank name from a destination file path.

    Directory parts and the file suffix never reach the label.

    Args:
        path: Destination file path

    Returns:
        File stem, e.g. "synths" for "out/synths.syx"
    """
    return Path(path).stem


def normalize_bank_name(name: str, width: int = 8) -> str:
    """
    Normalize a bank name to a fixed-width label.

    Args:
        name: Bank name
        width: Label width in characters (8 for single-bank output,
            7 when the last character is reserved for the bank number)

    Returns:
        Normalized name (uppercase, truncated and space-padded to width)

    Raises:
        LabelError: If width is outside 1-8
    """
    if not 1 <= width <= 8:
        raise LabelError(f"Bank name width must be 1-8, got {width}")

    name_upper = "".join(c if c in PRINTABLE_ASCII else "?" for c in name.upper())

    # Truncate if too long
    if len(name_upper) > width:
        name_upper = name_upper[:width]

    # Pad with spaces if too short
    return name_upper.ljust(width)


def validate_bank_id(bank_id: int) -> None:
    """
    Validate an FB-01 bank identifier (0x00 for bank A, 0x01 for bank B).

    Raises:
        LabelError: If bank_id is not 0 or 1
    """
    if bank_id not in (0x00, 0x01):
        raise LabelError(f"Bank id must be 0x00 or 0x01, got 0x{bank_id:02X}")
