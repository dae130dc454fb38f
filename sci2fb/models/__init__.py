"""Data models for FB-01 voice bank representation."""

from sci2fb.models.voice import BankCount, NibblizedPacket, VoicePayload, VOICE_SIZE, VOICES_PER_BANK
from sci2fb.models.bank import BankLabel, FB01Bank

__all__ = [
    "BankCount",
    "NibblizedPacket",
    "VoicePayload",
    "VOICE_SIZE",
    "VOICES_PER_BANK",
    "BankLabel",
    "FB01Bank",
]
