"""
Exceptions raised while converting SCI0 patch resources to FB-01 banks.
"""

from typing import Optional


class ConversionError(Exception):
    """Base class for all conversion failures."""

    pass


class InvalidHeaderError(ConversionError):
    """Raised when the identifier byte is not 0x89 (not an SCI0 patch resource)."""

    pass


class InvalidSizeError(ConversionError):
    """Raised when the file size matches neither the one-bank nor the two-bank layout."""

    def __init__(self, message: str, actual_size: int, title_length: Optional[int] = None):
        super().__init__(message)
        self.actual_size = actual_size
        self.title_length = title_length


class MissingSeparatorError(ConversionError):
    """Raised when a two-bank resource lacks the AB CD bank separator."""

    pass


class InvalidPayloadSizeError(ConversionError):
    """Raised when voice payload does not hold exactly 48 or 96 voices."""

    pass


class LabelError(ConversionError):
    """Raised when a bank label cannot be built from the given arguments."""

    pass


class BankFormatError(ConversionError):
    """Raised when an FB-01 bank SysEx file is malformed."""

    pass
