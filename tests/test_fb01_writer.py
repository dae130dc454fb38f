"""Tests for FB-01 bank SysEx writer."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sci2fb.errors import LabelError
from sci2fb.formats.fb01.writer import FB01BankWriter
from sci2fb.models.bank import BankLabel
from sci2fb.models.voice import BankCount, NibblizedPacket
from sci2fb.utils.nibble import denibblize


@pytest.fixture
def packets():
    """48 packets of distinct voice data."""
    return [NibblizedPacket.from_voice(bytes([i]) * 64) for i in range(48)]


class TestFB01BankWriter:
    """Test cases for bank assembly."""

    def test_file_size(self, packets):
        """Test that a 48-voice bank is exactly 6363 bytes."""
        data = FB01BankWriter().to_bytes(packets, "synths")

        assert len(data) == 6363
        assert FB01BankWriter.FILE_SIZE == 6363

    def test_header_bank_a(self, packets):
        """Test the bank A header and info packet size."""
        data = FB01BankWriter(FB01BankWriter.BANK_A).to_bytes(packets, "synths")

        assert data[:7] == bytes([0xF0, 0x43, 0x75, 0x00, 0x00, 0x00, 0x00])
        assert data[7:9] == bytes([0x00, 0x40])

    def test_header_bank_b(self, packets):
        """Test that bank B differs only in the bank id byte."""
        label = BankLabel.for_bank("x", 1)
        data_a = FB01BankWriter(FB01BankWriter.BANK_A).to_bytes(packets, label)
        data_b = FB01BankWriter(FB01BankWriter.BANK_B).to_bytes(packets, label)

        assert data_b[6] == 0x01
        assert data_a[:6] + data_a[7:] == data_b[:6] + data_b[7:]

    def test_terminator(self, packets):
        """Test the closing F7."""
        data = FB01BankWriter().to_bytes(packets, "synths")

        assert data[-1] == 0xF7
        assert data.count(0xF7) == 1

    def test_seven_bit_clean(self, packets):
        """Test that no data byte between F0 and F7 has bit 7 set."""
        data = FB01BankWriter().to_bytes(packets, "synths")

        assert all(b <= 0x7F for b in data[1:-1])

    def test_label_block_two_bank(self, packets):
        """Test the nibblized label for name 'X', bank A of two."""
        data = FB01BankWriter().to_bytes(packets, BankLabel.for_bank("x", 1))
        block = data[9:74]

        # 'X' = 0x58 -> 08 05, space = 0x20 -> 00 02, '1' = 0x31 -> 01 03
        assert block[:4] == bytes([0x08, 0x05, 0x00, 0x02])
        assert block[14:16] == bytes([0x01, 0x03])
        assert block[16:64] == bytes(48)
        assert denibblize(block[:64])[:8] == b"X      1"
        # Nibble sum 29 -> two's complement 0xE3 -> 7-bit 0x63
        assert block[64] == 0x63

    def test_label_block_bank_b(self, packets):
        """Test that the 8th label character is '2' for bank B."""
        data = FB01BankWriter(FB01BankWriter.BANK_B).to_bytes(packets, BankLabel.for_bank("x", 2))

        assert denibblize(data[9:73])[:8] == b"X      2"

    def test_label_from_string(self, packets):
        """Test that a plain name builds a full 8-character label."""
        data = FB01BankWriter().to_bytes(packets, "x")

        assert denibblize(data[9:73])[:8] == b"X       "

    def test_label_from_string_bank_b(self, packets):
        """Test that a plain name for bank B gets the two-bank '2' suffix."""
        data = FB01BankWriter(FB01BankWriter.BANK_B).to_bytes(packets, "x")

        assert denibblize(data[9:73])[:8] == b"X      2"

    def test_label_from_string_double_bank_a(self, packets):
        """Test that bank A of a two-bank conversion gets the '1' suffix."""
        data = FB01BankWriter().to_bytes(packets, "x", BankCount.DOUBLE)

        assert denibblize(data[9:73])[:8] == b"X      1"

    def test_label_from_string_single_bank_b(self, packets):
        with pytest.raises(LabelError):
            FB01BankWriter(FB01BankWriter.BANK_B).to_bytes(packets, "x", BankCount.SINGLE)

    def test_label_checksum_law(self, packets):
        data = FB01BankWriter().to_bytes(packets, "Kings Quest")
        block = data[9:74]

        assert (sum(block[:64]) + block[64]) & 0x7F == 0

    def test_packets_in_order(self, packets):
        """Test that voice packets follow the label block in voice order."""
        data = FB01BankWriter().to_bytes(packets, "synths")

        for i in (0, 1, 47):
            start = 74 + i * 131
            assert data[start : start + 131] == bytes(packets[i])

    def test_invalid_bank_id(self):
        with pytest.raises(LabelError):
            FB01BankWriter(0x02)

    def test_write_file(self, packets, tmp_path):
        """Test writing to disk, creating parent directories."""
        output = tmp_path / "banks" / "synths.syx"
        FB01BankWriter.write(packets, output, BankLabel.single("synths"))

        assert output.exists()
        assert output.stat().st_size == 6363
