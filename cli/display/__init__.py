"""
CLI display modules.
"""

from cli.display.tables import (
    display_patch_info,
    display_bank_info,
)
from cli.display.hex_view import display_hex_dump, display_region_map

__all__ = [
    "display_patch_info",
    "display_bank_info",
    "display_hex_dump",
    "display_region_map",
]
