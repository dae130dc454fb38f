"""
Voice data models for FB-01 voice banks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List

from sci2fb.errors import InvalidPayloadSizeError
from sci2fb.utils.checksum import calculate_fb01_checksum
from sci2fb.utils.nibble import denibblize, nibblize


VOICE_SIZE = 64
VOICES_PER_BANK = 48


class BankCount(Enum):
    """
    Number of 48-voice banks held by a patch resource.

    SCI0 patch resources for the FB-01 carry either one bank (48 voices)
    or two banks (96 voices, with an AB CD separator between them).
    """

    SINGLE = 1
    DOUBLE = 2

    @classmethod
    def from_voice_count(cls, voice_count: int) -> "BankCount":
        """
        Get bank count from a number of voices.

        Args:
            voice_count: 48 or 96

        Returns:
            Corresponding BankCount

        Raises:
            InvalidPayloadSizeError: If voice_count is not 48 or 96
        """
        for member in cls:
            if member.voice_count == voice_count:
                return member
        raise InvalidPayloadSizeError(
            f"Voice count must be {VOICES_PER_BANK} or {VOICES_PER_BANK * 2}, got {voice_count}"
        )

    @property
    def voice_count(self) -> int:
        return self.value * VOICES_PER_BANK

    @property
    def payload_size(self) -> int:
        """Raw payload size in bytes (3072 or 6144)."""
        return self.voice_count * VOICE_SIZE

    @property
    def is_double(self) -> bool:
        return self is BankCount.DOUBLE


@dataclass(frozen=True)
class VoicePayload:
    """
    Raw voice records extracted from a patch resource.

    Holds 48 or 96 consecutive 64-byte voice records. Voice bytes are
    opaque; nothing here interprets their musical content.

    Attributes:
        data: Concatenated voice records (3072 or 6144 bytes)
    """

    data: bytes

    def __post_init__(self):
        if len(self.data) % VOICE_SIZE:
            raise InvalidPayloadSizeError(
                f"Voice payload must be a multiple of {VOICE_SIZE} bytes, got {len(self.data)}"
            )
        # Raises for anything but 48 or 96 voices
        BankCount.from_voice_count(len(self.data) // VOICE_SIZE)
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_voices(cls, voices: List[bytes]) -> "VoicePayload":
        """Build a payload from a list of 64-byte voice records."""
        for i, voice in enumerate(voices):
            if len(voice) != VOICE_SIZE:
                raise InvalidPayloadSizeError(
                    f"Voice {i + 1} must be {VOICE_SIZE} bytes, got {len(voice)}"
                )
        return cls(b"".join(voices))

    @property
    def voice_count(self) -> int:
        return len(self.data) // VOICE_SIZE

    @property
    def bank_count(self) -> BankCount:
        return BankCount.from_voice_count(self.voice_count)

    def voice(self, index: int) -> bytes:
        """
        Get a single voice record.

        Args:
            index: Voice index (0-based)

        Returns:
            64-byte voice record
        """
        if not 0 <= index < self.voice_count:
            raise IndexError(f"Voice index must be 0-{self.voice_count - 1}, got {index}")
        start = index * VOICE_SIZE
        return self.data[start : start + VOICE_SIZE]

    def voices(self) -> List[bytes]:
        return list(self)

    def banks(self) -> List[List[bytes]]:
        """Split voices into banks of 48 (bank A first)."""
        voices = self.voices()
        return [
            voices[i : i + VOICES_PER_BANK] for i in range(0, len(voices), VOICES_PER_BANK)
        ]

    def __iter__(self) -> Iterator[bytes]:
        for i in range(self.voice_count):
            yield self.voice(i)

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class NibblizedPacket:
    """
    MIDI transport encoding of one 64-byte voice record.

    Layout (131 bytes):
        01 00       Packet size prefix (128 in 7-bit-per-byte form)
        [128]       Nibbles, low nibble first (each 0x00-0x0F)
        CS          Checksum (7-bit)

    The checksum is not verified at construction so packets read back
    from a damaged file can still be reported on; see checksum_valid.
    """

    data: bytes

    SIZE_PREFIX = b"\x01\x00"
    NIBBLE_COUNT = VOICE_SIZE * 2
    SIZE = len(SIZE_PREFIX) + NIBBLE_COUNT + 1

    def __post_init__(self):
        data = bytes(self.data)
        if len(data) != self.SIZE:
            raise ValueError(f"Packet must be {self.SIZE} bytes, got {len(data)}")
        if data[:2] != self.SIZE_PREFIX:
            raise ValueError(f"Invalid packet size prefix: {data[:2].hex(' ')}")
        bad = [i for i, b in enumerate(data[2:-1]) if b > 0x0F]
        if bad:
            raise ValueError(f"Nibble {bad[0]} out of range: 0x{data[2 + bad[0]]:02X}")
        if data[-1] > 0x7F:
            raise ValueError(f"Checksum must be 7-bit, got 0x{data[-1]:02X}")
        object.__setattr__(self, "data", data)

    @classmethod
    def from_voice(cls, voice: bytes) -> "NibblizedPacket":
        """
        Encode a voice record as a packet.

        Args:
            voice: 64-byte voice record

        Returns:
            Packet with size prefix, nibbles and checksum
        """
        if len(voice) != VOICE_SIZE:
            raise InvalidPayloadSizeError(
                f"Voice record must be {VOICE_SIZE} bytes, got {len(voice)}"
            )
        nibbles = nibblize(voice)
        return cls(cls.SIZE_PREFIX + nibbles + bytes([calculate_fb01_checksum(nibbles)]))

    @property
    def nibbles(self) -> bytes:
        return self.data[2:-1]

    @property
    def checksum(self) -> int:
        return self.data[-1]

    @property
    def checksum_valid(self) -> bool:
        return calculate_fb01_checksum(self.nibbles) == self.checksum

    def to_voice(self) -> bytes:
        """Decode the packet back to its 64-byte voice record."""
        return denibblize(self.nibbles)

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)
