"""Test configuration and fixtures."""

import pytest
from pathlib import Path


def build_patch(
    title: bytes = b"",
    banks: int = 1,
    separator: bytes = b"\xab\xcd",
    resource_id: int = 0x89,
) -> bytes:
    """
    Build a synthetic SCI0 FB-01 patch resource.

    Voice data is the sequence 0x00..0xFF repeating; bank B (if any)
    continues the sequence after the separator.
    """
    data = bytearray([resource_id, len(title)])
    data.extend(title)
    data.extend(i & 0xFF for i in range(3072))
    if banks == 2:
        data.extend(separator)
        data.extend((i + 0x80) & 0xFF for i in range(3072))
    return bytes(data)


@pytest.fixture
def patch_builder():
    """Return the patch resource builder."""
    return build_patch


@pytest.fixture
def single_bank_data():
    """Return a 3074-byte one-bank patch resource without title."""
    return build_patch()


@pytest.fixture
def double_bank_data():
    """Return a 6148+5-byte two-bank patch resource with title 'KINGS'."""
    return build_patch(title=b"KINGS", banks=2)


@pytest.fixture
def single_bank_file(tmp_path, single_bank_data):
    """Return path to a one-bank patch resource on disk."""
    path = tmp_path / "PATCH.002"
    path.write_bytes(single_bank_data)
    return path


@pytest.fixture
def double_bank_file(tmp_path, double_bank_data):
    """Return path to a two-bank patch resource on disk."""
    path = tmp_path / "SQ3.002"
    path.write_bytes(double_bank_data)
    return path
