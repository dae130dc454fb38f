"""
Sierra SCI0 patch resource reader.

Reads FB-01 patch resources (typically PATCH.002) and extracts the raw
voice records they contain.

File layout:
    0x00            0x89 (patch resource identifier)
    0x01            Title string length (T, 0-255)
    0x02            Title string (T bytes)
    0x02+T          Bank A: 48 voices x 64 bytes
    0xC02+T         AB CD separator        (two-bank resources only)
    0xC04+T         Bank B: 48 voices x 64 bytes (two-bank resources only)

Total size is 3074+T (one bank) or 6148+T (two banks).
"""

from pathlib import Path
from typing import Optional, Union

from sci2fb.errors import InvalidHeaderError, InvalidSizeError, MissingSeparatorError
from sci2fb.models.voice import BankCount, VoicePayload, VOICE_SIZE, VOICES_PER_BANK


class SCI0PatchReader:
    """
    Reader for SCI0 FB-01 patch resources.

    Validates the container layout and extracts a VoicePayload. The source
    buffer is never modified.

    Example:
        payload = SCI0PatchReader.read("PATCH.002")
        print(f"{payload.voice_count} voices")
    """

    # Constants
    RESOURCE_ID = 0x89
    HEADER_SIZE = 2
    SEPARATOR = b"\xab\xcd"

    # Size of one bank of voice data (48 voices x 64 bytes)
    BANK_SIZE = VOICES_PER_BANK * VOICE_SIZE

    # File sizes without the title string
    SINGLE_BANK_SIZE = HEADER_SIZE + BANK_SIZE  # 3074
    DOUBLE_BANK_SIZE = HEADER_SIZE + BANK_SIZE * 2 + len(SEPARATOR)  # 6148

    # Separator offset without the title string
    SEPARATOR_OFFSET = HEADER_SIZE + BANK_SIZE  # 0xC02

    def __init__(self):
        self.title_length = 0
        self.title = b""
        self.bank_count: Optional[BankCount] = None

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> VoicePayload:
        """
        Read a patch resource file and return its voices.

        Args:
            filepath: Path to the patch resource

        Returns:
            Extracted VoicePayload
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> VoicePayload:
        """
        Parse a patch resource file.

        Args:
            filepath: Path to the patch resource

        Returns:
            Extracted VoicePayload
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> VoicePayload:
        """
        Validate a patch resource and extract its voice records.

        Args:
            data: Raw patch resource contents

        Returns:
            Extracted VoicePayload (48 or 96 voices)

        Raises:
            InvalidHeaderError: If the identifier byte is not 0x89
            InvalidSizeError: If the size matches neither layout
            MissingSeparatorError: If a two-bank resource lacks AB CD
        """
        self.title_length = 0
        self.title = b""
        self.bank_count = None

        self._validate_header(data)

        title_length = data[1]
        bank_count = self._detect_bank_count(data, title_length)

        if bank_count.is_double:
            self._validate_separator(data, title_length)

        self.title_length = title_length
        self.title = bytes(data[self.HEADER_SIZE : self.HEADER_SIZE + title_length])
        self.bank_count = bank_count

        return VoicePayload(self._extract_voices(data))

    def _validate_header(self, data: bytes) -> None:
        """Check the patch resource identifier byte."""
        if len(data) == 0 or data[0] != self.RESOURCE_ID:
            actual = f"0x{data[0]:02X}" if len(data) else "empty file"
            raise InvalidHeaderError(
                f"Not an SCI patch resource: expected 0x{self.RESOURCE_ID:02X} "
                f"identifier, got {actual}"
            )

        if len(data) < self.HEADER_SIZE:
            raise InvalidSizeError(
                f"Patch resource too small: {len(data)} bytes", actual_size=len(data)
            )

    def _detect_bank_count(self, data: bytes, title_length: int) -> BankCount:
        """Determine bank count from the file size, accounting for the title."""
        single = self.SINGLE_BANK_SIZE + title_length
        double = self.DOUBLE_BANK_SIZE + title_length

        if len(data) == single:
            return BankCount.SINGLE
        if len(data) == double:
            return BankCount.DOUBLE

        raise InvalidSizeError(
            f"Not a valid FB-01 SCI0 patch resource: size is {len(data)} bytes, "
            f"expected {single} or {double} "
            f"({self.SINGLE_BANK_SIZE} or {self.DOUBLE_BANK_SIZE} + "
            f"title string length {title_length})",
            actual_size=len(data),
            title_length=title_length,
        )

    def _validate_separator(self, data: bytes, title_length: int) -> None:
        """Check the AB CD bank separator between voice 48 and voice 49."""
        offset = self.SEPARATOR_OFFSET + title_length
        found = bytes(data[offset : offset + len(self.SEPARATOR)])

        if found != self.SEPARATOR:
            raise MissingSeparatorError(
                f"Bank separator not found at 0x{offset:04X}: "
                f"expected {self.SEPARATOR.hex(' ').upper()}, got {found.hex(' ').upper()}"
            )

    def _extract_voices(self, data: bytes) -> bytes:
        """
        Copy the voice records out of the resource.

        Reading starts right after the title string. For two-bank
        resources the position skips the separator after voice 48.
        """
        voices = bytearray()
        pos = self.HEADER_SIZE + self.title_length

        for i in range(self.bank_count.voice_count):
            if i == VOICES_PER_BANK:
                pos += len(self.SEPARATOR)
            voices.extend(data[pos : pos + VOICE_SIZE])
            pos += VOICE_SIZE

        return bytes(voices)

    @property
    def title_text(self) -> str:
        """Title string decoded for display."""
        return self.title.decode("ascii", errors="replace")

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like an SCI0 FB-01 patch resource.

        Only the identifier byte and the file size are checked.

        Args:
            filepath: Path to check

        Returns:
            True if file appears to be a patch resource
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        with open(filepath, "rb") as f:
            header = f.read(2)

        if len(header) < 2 or header[0] != cls.RESOURCE_ID:
            return False

        size = filepath.stat().st_size - header[1]
        return size in (cls.SINGLE_BANK_SIZE, cls.DOUBLE_BANK_SIZE)
