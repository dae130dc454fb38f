"""
FB-01 voice bank SysEx writer.

Writes nibblized voice packets to .syx files in FB-01 bank dump format.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from sci2fb.errors import LabelError
from sci2fb.models.bank import BankLabel
from sci2fb.models.voice import BankCount, NibblizedPacket, VOICES_PER_BANK
from sci2fb.utils.checksum import add_checksum
from sci2fb.utils.nibble import nibblize
from sci2fb.utils.validation import validate_bank_id


class FB01BankWriter:
    """
    Writer for FB-01 voice bank SysEx files.

    Bank file layout (6363 bytes for 48 voices):
        0x0000  F0 43 75 00 00 00 BB    Header (BB = 00 bank A, 01 bank B)
        0x0007  00 40                   Info packet size (64)
        0x0009  [64]                    Nibblized 32-byte info packet (bank name)
        0x0049  CS                      Info packet checksum
        0x004A  [131 x 48]              Voice packets (01 00 + 128 nibbles + CS)
        0x18DA  F7                      End of exclusive

    Example:
        FB01BankWriter.write(packets_a, "synths1.syx", BankLabel.for_bank("synths", 1))
    """

    # Constants
    SYSEX_START = 0xF0
    YAMAHA_ID = 0x43
    SYSTEM_CHANNEL = 0x75  # Sub-status 7, system channel 6 (FB-01 default)
    SYSEX_END = 0xF7

    BANK_A = 0x00
    BANK_B = 0x01

    # Info packet size in 7-bit-per-byte form: 00 40 = 64
    INFO_SIZE = bytes([0x00, 0x40])

    HEADER_SIZE = 7
    LABEL_BLOCK_SIZE = BankLabel.INFO_PACKET_SIZE * 2 + 1  # 65
    FILE_SIZE = (
        HEADER_SIZE + len(INFO_SIZE) + LABEL_BLOCK_SIZE + NibblizedPacket.SIZE * VOICES_PER_BANK + 1
    )  # 6363

    def __init__(self, bank_id: int = BANK_A):
        """
        Initialize writer.

        Args:
            bank_id: 0x00 for bank A, 0x01 for bank B
        """
        validate_bank_id(bank_id)
        self.bank_id = bank_id

    @classmethod
    def write(
        cls,
        packets: Sequence[NibblizedPacket],
        filepath: Union[str, Path],
        label: Union[BankLabel, str],
        bank_id: int = BANK_A,
        bank_count: Optional[BankCount] = None,
    ) -> None:
        """
        Write a bank of packets to a SysEx file.

        Args:
            packets: Nibblized voice packets for the bank
            filepath: Output file path
            label: Bank label, or a name to build one from
            bank_id: 0x00 for bank A, 0x01 for bank B
            bank_count: Number of banks produced, used when label is a name
        """
        writer = cls(bank_id)
        data = writer.to_bytes(packets, label, bank_count)

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "wb") as f:
            f.write(data)

    def to_bytes(
        self,
        packets: Sequence[NibblizedPacket],
        label: Union[BankLabel, str],
        bank_count: Optional[BankCount] = None,
    ) -> bytes:
        """
        Assemble a complete bank SysEx stream.

        A name given as label becomes a single-bank label for bank A, and
        a numbered two-bank label for bank B or when bank_count is DOUBLE.

        Args:
            packets: Nibblized voice packets, in voice order
            label: Bank label, or a name to build one from
            bank_count: Number of banks produced, used when label is a name

        Returns:
            Complete SysEx file data

        Raises:
            LabelError: If bank B is requested for single-bank output
        """
        if isinstance(label, str):
            label = self._label_from_name(label, bank_count)

        parts: List[bytes] = [
            self._create_header(),
            self.INFO_SIZE,
            self._create_label_block(label),
        ]
        parts.extend(bytes(packet) for packet in packets)
        parts.append(bytes([self.SYSEX_END]))

        return b"".join(parts)

    def _label_from_name(self, name: str, bank_count: Optional[BankCount]) -> BankLabel:
        """Build the label for this bank from a plain name."""
        if self.bank_id == self.BANK_B:
            if bank_count is BankCount.SINGLE:
                raise LabelError("Bank B only exists in two-bank output")
            return BankLabel.for_bank(name, 2)

        if bank_count is BankCount.DOUBLE:
            return BankLabel.for_bank(name, 1)

        return BankLabel.single(name)

    def _create_header(self) -> bytes:
        """Create the bank dump header."""
        # F0 43 75 00 00 00 BB
        return bytes(
            [
                self.SYSEX_START,
                self.YAMAHA_ID,
                self.SYSTEM_CHANNEL,
                0x00,
                0x00,
                0x00,
                self.bank_id,
            ]
        )

    def _create_label_block(self, label: BankLabel) -> bytes:
        """
        Create the nibblized info packet.

        The 32-byte info packet becomes 64 nibbles followed by a checksum
        computed the same way as for voice packets.
        """
        return add_checksum(nibblize(label.info_packet))
