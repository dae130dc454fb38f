"""Tests for SCI0 patch resource reader."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sci2fb.errors import InvalidHeaderError, InvalidSizeError, MissingSeparatorError
from sci2fb.formats.sci0.reader import SCI0PatchReader
from sci2fb.models.voice import BankCount


class TestSCI0PatchReader:
    """Test cases for patch resource validation and extraction."""

    def test_single_bank(self, single_bank_data):
        """Test reading a 3074-byte one-bank resource."""
        reader = SCI0PatchReader()
        payload = reader.parse_bytes(single_bank_data)

        assert payload.voice_count == 48
        assert len(payload) == 48 * 64
        assert reader.bank_count == BankCount.SINGLE
        assert all(len(voice) == 64 for voice in payload)

    def test_single_bank_voice_order(self, single_bank_data):
        """Test that voices are taken in file order right after the header."""
        payload = SCI0PatchReader().parse_bytes(single_bank_data)

        assert payload.voice(0) == bytes(range(64))
        assert payload.voice(4) == bytes(range(0, 64))  # 256-byte period
        assert payload.voice(1) == bytes(range(64, 128))

    def test_double_bank(self, double_bank_data):
        """Test reading a two-bank resource with a title string."""
        reader = SCI0PatchReader()
        payload = reader.parse_bytes(double_bank_data)

        assert payload.voice_count == 96
        assert reader.bank_count == BankCount.DOUBLE
        assert reader.title == b"KINGS"
        assert reader.title_text == "KINGS"

    def test_double_bank_skips_separator(self, double_bank_data):
        """Test that voice 49 starts after the AB CD separator."""
        payload = SCI0PatchReader().parse_bytes(double_bank_data)

        assert payload.voice(47) == bytes(range(192, 256))
        assert payload.voice(48) == bytes((i + 0x80) & 0xFF for i in range(64))

    def test_title_offset_shifts_payload(self, patch_builder):
        """Test that the title length shifts every later offset."""
        data = patch_builder(title=b"x" * 255)
        assert len(data) == 3074 + 255

        payload = SCI0PatchReader().parse_bytes(data)
        assert payload.voice(0) == bytes(range(64))

    def test_invalid_header(self, single_bank_data):
        """Test that a wrong identifier byte is rejected."""
        data = b"\x00" + single_bank_data[1:]

        with pytest.raises(InvalidHeaderError):
            SCI0PatchReader().parse_bytes(data)

    def test_empty_file(self):
        """Test that an empty buffer is rejected as not a patch resource."""
        with pytest.raises(InvalidHeaderError):
            SCI0PatchReader().parse_bytes(b"")

    def test_header_checked_before_size(self):
        """Test that the header error wins over a size error."""
        with pytest.raises(InvalidHeaderError):
            SCI0PatchReader().parse_bytes(b"\x00\x00\x00")

    def test_invalid_size(self, single_bank_data):
        """Test that a truncated resource is rejected."""
        with pytest.raises(InvalidSizeError) as exc_info:
            SCI0PatchReader().parse_bytes(single_bank_data[:-1])

        assert exc_info.value.actual_size == 3073
        assert exc_info.value.title_length == 0

    def test_size_accounts_for_title_length(self, single_bank_data):
        """Test that the title length byte is part of the size check."""
        data = single_bank_data[:1] + b"\x05" + single_bank_data[2:]

        with pytest.raises(InvalidSizeError):
            SCI0PatchReader().parse_bytes(data)

    def test_missing_separator(self, patch_builder):
        """Test that a two-bank resource needs the AB CD separator."""
        data = patch_builder(banks=2, separator=b"\x00\x00")

        with pytest.raises(MissingSeparatorError):
            SCI0PatchReader().parse_bytes(data)

    def test_corrupted_separator_half(self, patch_builder):
        """Test that both separator bytes are checked."""
        data = patch_builder(title=b"T", banks=2, separator=b"\xab\x00")

        with pytest.raises(MissingSeparatorError):
            SCI0PatchReader().parse_bytes(data)

    def test_source_not_mutated(self, double_bank_data):
        """Test that parsing leaves the source buffer untouched."""
        data = bytearray(double_bank_data)
        SCI0PatchReader().parse_bytes(data)

        assert bytes(data) == double_bank_data

    def test_read_file(self, single_bank_file):
        """Test the read() classmethod."""
        payload = SCI0PatchReader.read(single_bank_file)
        assert payload.voice_count == 48

    def test_read_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SCI0PatchReader.read(tmp_path / "missing.002")

    def test_can_read(self, single_bank_file, double_bank_file, tmp_path):
        """Test the format probe."""
        assert SCI0PatchReader.can_read(single_bank_file)
        assert SCI0PatchReader.can_read(double_bank_file)

        other = tmp_path / "other.bin"
        other.write_bytes(b"\x89\x00\x01")
        assert not SCI0PatchReader.can_read(other)
        assert not SCI0PatchReader.can_read(tmp_path / "missing.002")

    def test_failed_parse_clears_state(self, double_bank_data):
        """Test that a reused reader keeps nothing from a rejected resource."""
        reader = SCI0PatchReader()
        reader.parse_bytes(double_bank_data)
        assert reader.title == b"KINGS"

        with pytest.raises(InvalidSizeError):
            reader.parse_bytes(double_bank_data[:-1])

        assert reader.title == b""
        assert reader.title_length == 0
        assert reader.bank_count is None

    def test_missing_separator_sets_no_title(self, patch_builder):
        reader = SCI0PatchReader()

        with pytest.raises(MissingSeparatorError):
            reader.parse_bytes(patch_builder(title=b"SQ3", banks=2, separator=b"\x00\x00"))

        assert reader.title == b""
        assert reader.bank_count is None
