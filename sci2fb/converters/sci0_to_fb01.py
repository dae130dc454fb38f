"""
SCI0 patch resource to FB-01 bank converter.

Converts Sierra SCI0 FB-01 patch resources (PATCH.002) into one or two
FB-01 voice bank SysEx files that the FB-01 can load directly.

The conversion process:
1. Validate the patch resource and extract the 64-byte voice records
2. Nibblize each voice into a 131-byte packet with checksum
3. Split packets into bank A (voices 1-48) and bank B (voices 49-96)
4. Assemble each bank with header, label packet and terminator

Nothing is written until every bank has been assembled, so a failed
conversion never leaves partial output behind.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from sci2fb.errors import ConversionError, InvalidPayloadSizeError
from sci2fb.formats.fb01.writer import FB01BankWriter
from sci2fb.formats.sci0.reader import SCI0PatchReader
from sci2fb.models.bank import BankLabel
from sci2fb.models.voice import BankCount, NibblizedPacket, VoicePayload, VOICES_PER_BANK
from sci2fb.utils.validation import bank_name_from_path


PacketList = List[NibblizedPacket]


class Nibblizer:
    """
    Encodes voice payload into FB-01 voice packets.

    Each 64-byte voice becomes a NibblizedPacket (01 00, 128 nibbles,
    checksum). Voices 1-48 go to bank A, voices 49-96 to bank B.
    """

    VALID_SIZES = tuple(count.payload_size for count in BankCount)  # 3072, 6144

    def encode(self, payload: Union[VoicePayload, bytes]) -> Tuple[PacketList, Optional[PacketList]]:
        """
        Nibblize a voice payload.

        Args:
            payload: VoicePayload, or raw voice bytes (3072 or 6144)

        Returns:
            (bank A packets, bank B packets or None for single-bank payloads)

        Raises:
            InvalidPayloadSizeError: If payload is not 3072 or 6144 bytes
        """
        data = payload.data if isinstance(payload, VoicePayload) else bytes(payload)

        if len(data) not in self.VALID_SIZES:
            raise InvalidPayloadSizeError(
                f"Voice data is not the expected size ({' or '.join(map(str, self.VALID_SIZES))}), "
                f"actual size = {len(data)}"
            )

        banks = [
            [NibblizedPacket.from_voice(voice) for voice in bank]
            for bank in VoicePayload(data).banks()
        ]

        if len(banks) == 1:
            return banks[0], None
        return banks[0], banks[1]


def decode(container: bytes) -> VoicePayload:
    """
    Validate an SCI0 patch resource and extract its voices.

    Args:
        container: Raw patch resource bytes

    Returns:
        VoicePayload with 48 or 96 voices
    """
    return SCI0PatchReader().parse_bytes(container)


def encode(payload: Union[VoicePayload, bytes]) -> Tuple[PacketList, Optional[PacketList]]:
    """
    Nibblize voice payload into bank A and (optionally) bank B packets.

    Args:
        payload: Voices to encode

    Returns:
        (bank A packets, bank B packets or None)
    """
    return Nibblizer().encode(payload)


def assemble(
    packets: Sequence[NibblizedPacket],
    label: Union[BankLabel, str],
    bank_id: int = FB01BankWriter.BANK_A,
    bank_count: Optional[BankCount] = None,
) -> bytes:
    """
    Assemble a complete FB-01 bank SysEx stream.

    A name is turned into a label for the bank: 8 characters for
    single-bank output, 7 characters plus '1' or '2' when two banks are
    produced. Bank B always gets the two-bank form.

    Args:
        packets: Voice packets for one bank
        label: Bank label, or a name to build one from
        bank_id: 0x00 for bank A, 0x01 for bank B
        bank_count: Number of banks produced from the payload

    Returns:
        Bank file data (6363 bytes for 48 voices)

    Example:
        bank_a, bank_b = encode(payload)
        assemble(bank_a, "KQ", 0x00, BankCount.DOUBLE)  # label "KQ     1"
    """
    return FB01BankWriter(bank_id).to_bytes(packets, label, bank_count)


def convert(container: bytes, names: Optional[Sequence[str]] = None) -> List[bytes]:
    """
    Run decode, encode and assemble over a patch resource.

    Args:
        container: Raw patch resource bytes
        names: Bank names (one per bank, or one shared); defaults to the
            resource title

    Returns:
        List of bank file data, bank A first
    """
    return SCI0ToFB01Converter().convert_bytes(container, names)


def make_labels(names: Sequence[str], bank_count: BankCount) -> List[BankLabel]:
    """
    Build the bank labels for a conversion.

    Single-bank output uses the full 8 characters of the name. Two-bank
    output uses 7 characters plus the bank number ('1' or '2'). A single
    name given for a two-bank conversion is used for both banks.

    Args:
        names: One name per bank (or a single shared name)
        bank_count: Number of banks being produced

    Returns:
        One BankLabel per bank
    """
    if not names:
        raise ConversionError("At least one bank name is required")

    if bank_count is BankCount.SINGLE:
        return [BankLabel.single(names[0])]

    if len(names) == 1:
        names = [names[0], names[0]]

    return [BankLabel.for_bank(name, i + 1) for i, name in enumerate(names[:2])]


class SCI0ToFB01Converter:
    """
    Converter from SCI0 patch resources to FB-01 bank SysEx files.

    Attributes:
        bank_count: Number of banks in the last converted resource
        title: Title string of the last converted resource
    """

    DEFAULT_NAME = "SCI0"

    def __init__(self):
        self.bank_count: Optional[BankCount] = None
        self.title = ""
        self.voice_count = 0

    def convert(
        self, source: Union[str, Path, bytes], names: Optional[Sequence[str]] = None
    ) -> List[bytes]:
        """
        Convert a patch resource to FB-01 bank data.

        Args:
            source: Path to the patch resource, or its raw bytes
            names: Bank names (one per bank, or one shared)

        Returns:
            List of bank file data, one entry per bank
        """
        if isinstance(source, (bytes, bytearray)):
            return self.convert_bytes(bytes(source), names)

        source = Path(source)

        with open(source, "rb") as f:
            data = f.read()

        return self.convert_bytes(data, names)

    def convert_bytes(self, data: bytes, names: Optional[Sequence[str]] = None) -> List[bytes]:
        """
        Convert patch resource bytes to FB-01 bank data.

        Args:
            data: Raw patch resource contents
            names: Bank names; defaults to the resource title

        Returns:
            List of bank file data (bank A first)
        """
        reader = SCI0PatchReader()
        payload = reader.parse_bytes(data)

        self.bank_count = payload.bank_count
        self.voice_count = payload.voice_count
        self.title = reader.title_text

        if not names:
            names = [self.title.strip() or self.DEFAULT_NAME]

        labels = make_labels(names, self.bank_count)
        packets_a, packets_b = Nibblizer().encode(payload)

        if packets_b is None:
            return [assemble(packets_a, labels[0], FB01BankWriter.BANK_A)]

        return [
            assemble(packets_a, labels[0], FB01BankWriter.BANK_A),
            assemble(packets_b, labels[1], FB01BankWriter.BANK_B),
        ]

    def convert_and_save(
        self, source_path: Union[str, Path], output_paths: Sequence[Union[str, Path]]
    ) -> List[Path]:
        """
        Convert a patch resource and save the bank files.

        Bank names are taken from the output file names.

        Args:
            source_path: Path to the patch resource
            output_paths: One path per bank (bank A first)

        Returns:
            Paths written

        Raises:
            ConversionError: If the number of output paths does not match
                the number of banks in the resource
        """
        output_paths = [Path(p) for p in output_paths]
        banks = self.convert(source_path, [bank_name_from_path(p) for p in output_paths])

        if len(output_paths) != len(banks):
            raise ConversionError(
                f"Patch resource holds {len(banks)} bank(s) "
                f"({len(banks) * VOICES_PER_BANK} voices) but "
                f"{len(output_paths)} output file(s) were given"
            )

        for output_path, bank_data in zip(output_paths, banks):
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "wb") as f:
                f.write(bank_data)

        return output_paths


def convert_sci0_to_fb01(
    source_path: Union[str, Path], output_paths: Sequence[Union[str, Path]]
) -> List[Path]:
    """
    Convert an SCI0 patch resource to FB-01 bank SysEx files.

    Convenience function for simple conversion.

    Args:
        source_path: Path to source patch resource
        output_paths: Paths for output .syx files (one per bank)

    Example:
        convert_sci0_to_fb01("PATCH.002", ["game1.syx", "game2.syx"])
    """
    converter = SCI0ToFB01Converter()
    return converter.convert_and_save(source_path, output_paths)
