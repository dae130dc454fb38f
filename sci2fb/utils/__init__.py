"""Utility functions for SCI2FB."""

from sci2fb.utils.nibble import nibblize, denibblize
from sci2fb.utils.checksum import calculate_fb01_checksum, verify_checksum

__all__ = [
    "nibblize",
    "denibblize",
    "calculate_fb01_checksum",
    "verify_checksum",
]
