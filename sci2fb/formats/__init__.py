"""Format handlers for SCI0 patch resources and FB-01 bank dumps."""

from sci2fb.formats.sci0 import SCI0PatchReader
from sci2fb.formats.fb01 import FB01BankReader, FB01BankWriter

__all__ = ["SCI0PatchReader", "FB01BankReader", "FB01BankWriter"]
