"""Tests for FB-01 nibble codec and checksum."""

import pytest
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sci2fb.utils.nibble import nibblize, denibblize
from sci2fb.utils.checksum import add_checksum, calculate_fb01_checksum, verify_checksum


class TestNibbleCodec:
    """Test cases for nibble encoding/decoding."""

    def test_low_nibble_first(self):
        """Test that the low nibble is emitted before the high nibble."""
        assert nibblize(bytes([0x3A])) == bytes([0x0A, 0x03])

    def test_encode_doubles_length(self):
        """Test that every byte becomes two."""
        assert len(nibblize(bytes(64))) == 128

    def test_all_nibbles_are_4bit(self):
        """Test that encoded bytes never exceed 0x0F."""
        encoded = nibblize(bytes(range(256)))
        assert all(b <= 0x0F for b in encoded)

    def test_encode_list_input(self):
        """Test encoding from a list of ints."""
        assert nibblize([0xFF, 0x10]) == bytes([0x0F, 0x0F, 0x00, 0x01])

    def test_decode_simple(self):
        """Test pairing nibbles back as low | (high << 4)."""
        assert denibblize(bytes([0x0A, 0x03, 0x0F, 0x0F])) == bytes([0x3A, 0xFF])

    def test_roundtrip_voice_record(self):
        """Test that a 64-byte voice survives encode then decode."""
        voice = bytes((i * 37 + 11) & 0xFF for i in range(64))
        assert denibblize(nibblize(voice)) == voice

    def test_decode_odd_length(self):
        """Test that odd-length input is rejected."""
        with pytest.raises(ValueError):
            denibblize(bytes([0x01, 0x02, 0x03]))

    def test_empty_data(self):
        """Test with empty input."""
        assert nibblize(b"") == b""
        assert denibblize(b"") == b""


class TestFB01Checksum:
    """Test cases for the 7-bit two's complement checksum."""

    def test_zero_data(self):
        """Test checksum of all-zero nibbles."""
        assert calculate_fb01_checksum(bytes(128)) == 0x00

    def test_known_value(self):
        """Test checksum of 1 + 2 + 3."""
        # -6 mod 256 = 0xFA, masked to 7 bits = 0x7A
        assert calculate_fb01_checksum([0x01, 0x02, 0x03]) == 0x7A

    def test_sum_wraps_at_8_bits(self):
        """Test that the sum is reduced mod 256 before negation."""
        data = bytes([0x0F] * 128)  # 1920 = 0x780
        assert calculate_fb01_checksum(data) == 0x00

    def test_checksum_is_7bit(self):
        """Test that the checksum never has bit 7 set."""
        for n in range(0, 256, 7):
            assert calculate_fb01_checksum(bytes([n & 0x0F] * (n + 1))) <= 0x7F

    def test_packet_sum_law(self):
        """Test that nibbles plus checksum sum to zero in the low 7 bits."""
        nibbles = nibblize(bytes(range(64)))
        checksum = calculate_fb01_checksum(nibbles)
        assert (sum(nibbles) + checksum) & 0x7F == 0

    def test_verify(self):
        """Test checksum verification."""
        nibbles = nibblize(b"FB-01 voice")
        checksum = calculate_fb01_checksum(nibbles)
        assert verify_checksum(nibbles, checksum)
        assert not verify_checksum(nibbles, (checksum + 1) & 0x7F)

    def test_add_checksum(self):
        """Test appending the checksum."""
        result = add_checksum([0x01, 0x02, 0x03])
        assert result == bytes([0x01, 0x02, 0x03, 0x7A])
