"""Yamaha FB-01 voice bank SysEx format handlers."""

from sci2fb.formats.fb01.reader import FB01BankReader
from sci2fb.formats.fb01.writer import FB01BankWriter

__all__ = ["FB01BankReader", "FB01BankWriter"]
