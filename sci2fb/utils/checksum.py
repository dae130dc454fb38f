"""
FB-01 SysEx checksum calculation utilities.

Every nibblized packet in an FB-01 bank dump ends with a checksum byte
calculated as:
1. Sum all nibble bytes of the packet (not the 01 00 / 00 40 size prefix)
2. Keep the lower 8 bits of the sum
3. Take the two's complement of that value
4. Keep the lower 7 bits

A receiver adds the checksum to the packet sum and expects the lower
7 bits of the total to be zero.
"""

from typing import List, Union


def calculate_fb01_checksum(data: Union[bytes, List[int]]) -> int:
    """
    Calculate the FB-01 checksum for a nibblized packet.

    Args:
        data: Nibble bytes to calculate checksum over

    Returns:
        Checksum value (0-127)

    Example:
        >>> calculate_fb01_checksum(bytes([0x01, 0x02, 0x03]))
        122
    """
    if isinstance(data, list):
        data = bytes(data)

    total = sum(data) & 0xFF

    return ((~total) + 1) & 0x7F


def verify_checksum(data: Union[bytes, List[int]], expected_checksum: int) -> bool:
    """
    Verify an FB-01 packet checksum.

    Args:
        data: Nibble bytes the checksum was calculated over
        expected_checksum: The checksum byte from the message

    Returns:
        True if checksum is valid, False otherwise
    """
    return calculate_fb01_checksum(data) == expected_checksum


def add_checksum(data: Union[bytes, List[int]]) -> bytes:
    """
    Calculate and append checksum to data.

    Args:
        data: Nibble bytes

    Returns:
        Original data with checksum appended
    """
    if isinstance(data, list):
        data = bytes(data)

    return data + bytes([calculate_fb01_checksum(data)])
