"""
Converters from SCI0 patch resources to FB-01 voice banks.

Example:
    from sci2fb.converters import convert_sci0_to_fb01

    # Convert a two-bank patch resource into two FB-01 bank files
    convert_sci0_to_fb01("PATCH.002", ["game1.syx", "game2.syx"])
"""

from sci2fb.converters.sci0_to_fb01 import (
    Nibblizer,
    SCI0ToFB01Converter,
    assemble,
    convert,
    convert_sci0_to_fb01,
    decode,
    encode,
    make_labels,
)

__all__ = [
    "Nibblizer",
    "SCI0ToFB01Converter",
    "assemble",
    "convert",
    "convert_sci0_to_fb01",
    "decode",
    "encode",
    "make_labels",
]
