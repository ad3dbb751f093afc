# nse/errors.py
"""
Exception types raised by the NSE cipher.

All exceptions inherit from NseError for unified handling.
"""


class NseError(Exception):
    """Base exception for NSE operations."""
    pass


class NotPositiveDataLengthError(NseError):
    """Raised when a buffer handed to the cipher is empty."""

    def __init__(self, buffer_name: str):
        super().__init__(f"{buffer_name} length must be positive")
        self.buffer_name = buffer_name


class DifferentIVLengthError(NseError):
    """Raised when the IV and the ciphertext have different lengths."""

    def __init__(self, iv_length: int, data_length: int):
        super().__init__(
            f"IV length {iv_length} differs from ciphertext length {data_length}"
        )
        self.iv_length = iv_length
        self.data_length = data_length


class WrongDataFormatError(NseError):
    """Raised when encoded data cannot be parsed."""
    pass


class NotPositiveKeyError(NseError):
    """Raised when the key is not a positive integer."""
    pass


class DegenerateKeyError(NseError):
    """Raised when every element of the derived key is zero."""
    pass
