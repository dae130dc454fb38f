"""Sierra SCI0 patch resource format handlers."""

from sci2fb.formats.sci0.reader import SCI0PatchReader

__all__ = ["SCI0PatchReader"]
