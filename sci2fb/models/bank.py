"""
Bank data models for FB-01 voice banks.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from sci2fb.errors import LabelError
from sci2fb.utils.validation import normalize_bank_name


@dataclass(frozen=True)
class BankLabel:
    """
    Bank name shown by the FB-01.

    The 8-character name sits at the start of a 32-byte info packet; the
    remaining 24 bytes are zero. The packet is sent nibblized (64 bytes)
    followed by a checksum byte.

    Example:
        BankLabel.for_bank("synths", 1).name  # "SYNTHS 1"
    """

    name: str

    NAME_LENGTH = 8
    INFO_PACKET_SIZE = 32

    def __post_init__(self):
        if len(self.name) != self.NAME_LENGTH:
            raise LabelError(
                f"Bank label must be {self.NAME_LENGTH} characters, got {len(self.name)}"
            )
        try:
            self.name.encode("ascii")
        except UnicodeEncodeError:
            raise LabelError(f"Bank label must be ASCII: {self.name!r}") from None

    @classmethod
    def single(cls, name: str) -> "BankLabel":
        """Label for a single-bank conversion: full 8 characters from name."""
        return cls(normalize_bank_name(name, cls.NAME_LENGTH))

    @classmethod
    def for_bank(cls, name: str, bank_number: int) -> "BankLabel":
        """
        Label for one half of a two-bank conversion.

        Args:
            name: Bank name; the first 7 characters are used
            bank_number: 1 (bank A) or 2 (bank B), stored as the 8th character

        Returns:
            BankLabel
        """
        if bank_number not in (1, 2):
            raise LabelError(f"Bank number must be 1 or 2, got {bank_number}")
        return cls(normalize_bank_name(name, cls.NAME_LENGTH - 1) + str(bank_number))

    @classmethod
    def from_info_packet(cls, packet: bytes) -> "BankLabel":
        """Recover the label from a decoded 32-byte info packet."""
        raw = packet[: cls.NAME_LENGTH]
        return cls("".join(chr(b) if 0x20 <= b < 0x7F else "?" for b in raw).ljust(8))

    @property
    def info_packet(self) -> bytes:
        """The 32-byte info packet: name followed by zero bytes."""
        return self.name.encode("ascii").ljust(self.INFO_PACKET_SIZE, b"\x00")

    @property
    def display_name(self) -> str:
        return self.name.rstrip()

    def __str__(self) -> str:
        return self.name


@dataclass
class FB01Bank:
    """
    An FB-01 voice bank as read back from a SysEx bank file.

    Attributes:
        bank_id: 0x00 (bank A) or 0x01 (bank B)
        label: Bank label from the info packet
        voices: 48 decoded 64-byte voice records
        checksum_errors: Packet indices whose checksum did not match;
            -1 stands for the label packet, 0-47 for voices
    """

    bank_id: int
    label: BankLabel
    voices: List[bytes] = field(default_factory=list)
    checksum_errors: List[int] = field(default_factory=list)
    source_path: Optional[str] = None

    @property
    def name(self) -> str:
        return self.label.display_name

    @property
    def bank_letter(self) -> str:
        return "A" if self.bank_id == 0x00 else "B"

    @property
    def is_valid(self) -> bool:
        return not self.checksum_errors
