"""
SCI2FB - Sierra SCI0 patch resource to Yamaha FB-01 bank converter.

This library provides tools to:
- Read and validate SCI0 FB-01 patch resources (PATCH.002)
- Write FB-01 voice bank SysEx files (.syx)
- Read FB-01 bank files back and verify their checksums

Example usage:
    from sci2fb import decode, encode, assemble

    payload = decode(open("PATCH.002", "rb").read())
    bank_a, bank_b = encode(payload)
    syx = assemble(bank_a, "GAME", 0x00, payload.bank_count)
"""

__version__ = "1.0.0"
__author__ = "SCI2FB Contributors"

from sci2fb.converters.sci0_to_fb01 import (
    Nibblizer,
    SCI0ToFB01Converter,
    assemble,
    convert,
    convert_sci0_to_fb01,
    decode,
    encode,
)
from sci2fb.errors import (
    BankFormatError,
    ConversionError,
    InvalidHeaderError,
    InvalidPayloadSizeError,
    InvalidSizeError,
    LabelError,
    MissingSeparatorError,
)
from sci2fb.formats.fb01.reader import FB01BankReader
from sci2fb.formats.fb01.writer import FB01BankWriter
from sci2fb.formats.sci0.reader import SCI0PatchReader
from sci2fb.models.bank import BankLabel, FB01Bank
from sci2fb.models.voice import BankCount, NibblizedPacket, VoicePayload

__all__ = [
    "Nibblizer",
    "SCI0ToFB01Converter",
    "assemble",
    "convert",
    "convert_sci0_to_fb01",
    "decode",
    "encode",
    "BankFormatError",
    "ConversionError",
    "InvalidHeaderError",
    "InvalidPayloadSizeError",
    "InvalidSizeError",
    "LabelError",
    "MissingSeparatorError",
    "FB01BankReader",
    "FB01BankWriter",
    "SCI0PatchReader",
    "BankLabel",
    "FB01Bank",
    "BankCount",
    "NibblizedPacket",
    "VoicePayload",
]
