"""
Transmit FB-01 bank files to an FB-01 via MIDI.

A bank file is a single SysEx message (F0 ... F7), so transmission is
one mido sysex message. The bank is validated with FB01BankReader first:
the FB-01 silently discards banks with bad checksums.
"""

from pathlib import Path
from typing import List, Optional, Union

from sci2fb.formats.fb01.reader import FB01BankReader
from sci2fb.models.bank import FB01Bank


def list_output_ports() -> List[str]:
    """Return the names of all available MIDI output ports."""
    import mido

    return mido.get_output_names()


def find_midi_port(port_name: Optional[str] = None) -> Optional[str]:
    """
    Find a MIDI output port by name or return the first available.

    Args:
        port_name: Exact name or case-insensitive substring

    Returns:
        Port name, or None if nothing matches
    """
    ports = list_output_ports()

    if not ports:
        return None

    if port_name:
        if port_name in ports:
            return port_name
        matches = [p for p in ports if port_name.lower() in p.lower()]
        return matches[0] if matches else None

    # Prefer USB MIDI interfaces
    for p in ports:
        if "midi" in p.lower() or "usb" in p.lower():
            return p

    return ports[0]


def bank_to_message(data: bytes):
    """
    Wrap a bank file in a mido sysex message.

    Args:
        data: Complete bank file (F0 ... F7)

    Returns:
        mido.Message of type "sysex" (F0/F7 stripped)
    """
    import mido

    return mido.Message("sysex", data=list(data[1:-1]))


def send_bank(source: Union[str, Path, bytes], port_name: Optional[str] = None) -> FB01Bank:
    """
    Validate a bank file and send it to the FB-01.

    Args:
        source: Path to bank .syx file, or its bytes
        port_name: MIDI output port (auto-detect if None)

    Returns:
        The validated bank that was sent

    Raises:
        BankFormatError: If the bank is malformed or has a bad checksum
        IOError: If no MIDI output port is available
    """
    import mido

    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        with open(source, "rb") as f:
            data = f.read()

    bank = FB01BankReader(strict=True).parse_bytes(data)

    out_port = find_midi_port(port_name)
    if not out_port:
        wanted = f" matching '{port_name}'" if port_name else ""
        raise IOError(f"No MIDI output port found{wanted}")

    with mido.open_output(out_port) as outport:
        outport.send(bank_to_message(data))

    return bank
