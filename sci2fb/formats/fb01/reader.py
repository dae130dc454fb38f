"""
FB-01 voice bank SysEx reader.

Reads .syx bank files (as written by FB01BankWriter or dumped from an
FB-01) back into decoded voice records, checking every packet checksum.
"""

from pathlib import Path
from typing import List, Union

from sci2fb.errors import BankFormatError
from sci2fb.formats.fb01.writer import FB01BankWriter
from sci2fb.models.bank import BankLabel, FB01Bank
from sci2fb.models.voice import NibblizedPacket, VOICES_PER_BANK
from sci2fb.utils.checksum import verify_checksum
from sci2fb.utils.nibble import denibblize


class FB01BankReader:
    """
    Reader for FB-01 voice bank SysEx files.

    Example:
        bank = FB01BankReader.read("synths1.syx")
        print(f"Bank {bank.bank_letter}: {bank.name}, {len(bank.voices)} voices")
    """

    HEADER_PREFIX = bytes(
        [FB01BankWriter.SYSEX_START, FB01BankWriter.YAMAHA_ID, FB01BankWriter.SYSTEM_CHANNEL, 0, 0, 0]
    )
    LABEL_OFFSET = FB01BankWriter.HEADER_SIZE + len(FB01BankWriter.INFO_SIZE)
    VOICES_OFFSET = LABEL_OFFSET + FB01BankWriter.LABEL_BLOCK_SIZE

    def __init__(self, strict: bool = False):
        """
        Initialize reader.

        Args:
            strict: Raise BankFormatError on the first checksum mismatch
                instead of collecting mismatches in FB01Bank.checksum_errors
        """
        self.strict = strict

    @classmethod
    def read(cls, filepath: Union[str, Path], strict: bool = False) -> FB01Bank:
        """
        Read an FB-01 bank SysEx file.

        Args:
            filepath: Path to .syx file
            strict: Raise on checksum mismatch

        Returns:
            Parsed FB01Bank
        """
        reader = cls(strict)
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> FB01Bank:
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        bank = self.parse_bytes(data)
        bank.source_path = str(filepath)
        return bank

    def parse_bytes(self, data: bytes) -> FB01Bank:
        """
        Parse an FB-01 bank SysEx stream.

        Args:
            data: Raw .syx file contents

        Returns:
            Parsed FB01Bank

        Raises:
            BankFormatError: If the stream structure is invalid, or a
                checksum fails in strict mode
        """
        data = bytes(data)

        if len(data) != FB01BankWriter.FILE_SIZE:
            raise BankFormatError(
                f"Invalid FB-01 bank size: {len(data)} (expected {FB01BankWriter.FILE_SIZE})"
            )

        if data[:6] != self.HEADER_PREFIX:
            raise BankFormatError(f"Invalid FB-01 bank header: {data[:7].hex(' ').upper()}")

        bank_id = data[6]
        if bank_id not in (FB01BankWriter.BANK_A, FB01BankWriter.BANK_B):
            raise BankFormatError(f"Invalid bank id: 0x{bank_id:02X}")

        if data[7:9] != FB01BankWriter.INFO_SIZE:
            raise BankFormatError(f"Invalid info packet size: {data[7:9].hex(' ').upper()}")

        if data[-1] != FB01BankWriter.SYSEX_END:
            raise BankFormatError(f"Missing end of exclusive: 0x{data[-1]:02X}")

        checksum_errors: List[int] = []

        label = self._parse_label(data, checksum_errors)
        voices = self._parse_voices(data, checksum_errors)

        return FB01Bank(
            bank_id=bank_id,
            label=label,
            voices=voices,
            checksum_errors=checksum_errors,
        )

    def _parse_label(self, data: bytes, checksum_errors: List[int]) -> BankLabel:
        """Decode the info packet and recover the bank label."""
        block = data[self.LABEL_OFFSET : self.LABEL_OFFSET + FB01BankWriter.LABEL_BLOCK_SIZE]
        nibbles, checksum = block[:-1], block[-1]

        if not verify_checksum(nibbles, checksum):
            self._checksum_failed("label packet", checksum_errors, -1)

        return BankLabel.from_info_packet(denibblize(nibbles))

    def _parse_voices(self, data: bytes, checksum_errors: List[int]) -> List[bytes]:
        """Split the voice area into packets and decode each one."""
        voices = []

        for i in range(VOICES_PER_BANK):
            start = self.VOICES_OFFSET + i * NibblizedPacket.SIZE
            try:
                packet = NibblizedPacket(data[start : start + NibblizedPacket.SIZE])
            except ValueError as e:
                raise BankFormatError(f"Voice {i + 1}: {e}") from e

            if not packet.checksum_valid:
                self._checksum_failed(f"voice {i + 1}", checksum_errors, i)

            voices.append(packet.to_voice())

        return voices

    def _checksum_failed(self, what: str, checksum_errors: List[int], index: int) -> None:
        if self.strict:
            raise BankFormatError(f"Checksum FAILED for {what}")
        checksum_errors.append(index)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like an FB-01 bank SysEx file.

        Args:
            filepath: Path to check

        Returns:
            True if file has the FB-01 bank header and size
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        if filepath.stat().st_size != FB01BankWriter.FILE_SIZE:
            return False

        with open(filepath, "rb") as f:
            header = f.read(6)

        return header == cls.HEADER_PREFIX
