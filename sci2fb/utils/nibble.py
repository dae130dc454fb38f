"""
FB-01 nibble encoding/decoding utilities.

The FB-01 cannot take raw 8-bit voice data over SysEx, since MIDI
requires every data byte to have bit 7 clear. Each byte is therefore
split into two bytes that only carry 4 bits each ("nibbles").

Encoding scheme:
- Take 1 byte of raw 8-bit data
- Emit the low nibble first, then the high nibble
- Result: 2 bytes (each 0x00-0x0F) for every input byte

Note the order is low-then-high, the reverse of a natural hex reading.

Example:
    Input:  [0x3A]
    Output: [0x0A, 0x03]
"""

from typing import List, Union


def nibblize(raw_data: Union[bytes, List[int]]) -> bytes:
    """
    Encode 8-bit raw data to FB-01 nibble pairs.

    Args:
        raw_data: The raw 8-bit data to encode

    Returns:
        Nibblized data, twice the input length

    Example:
        >>> nibblize(b'\\x3a\\xff')
        b'\\n\\x03\\x0f\\x0f'
    """
    if isinstance(raw_data, list):
        raw_data = bytes(raw_data)

    result = bytearray()

    for byte in raw_data:
        result.append(byte & 0x0F)
        result.append((byte >> 4) & 0x0F)

    return bytes(result)


def denibblize(encoded_data: Union[bytes, List[int]]) -> bytes:
    """
    Decode FB-01 nibble pairs back to 8-bit raw data.

    Consecutive bytes are paired as ``low | (high << 4)``. Only the lower
    4 bits of each encoded byte are used.

    Args:
        encoded_data: Nibblized data (even length)

    Returns:
        Decoded 8-bit raw data, half the input length

    Raises:
        ValueError: If the encoded data has an odd length
    """
    if isinstance(encoded_data, list):
        encoded_data = bytes(encoded_data)

    if len(encoded_data) % 2:
        raise ValueError(f"Nibblized data must have an even length, got {len(encoded_data)}")

    result = bytearray()

    for i in range(0, len(encoded_data), 2):
        low = encoded_data[i] & 0x0F
        high = encoded_data[i + 1] & 0x0F
        result.append(low | (high << 4))

    return bytes(result)
