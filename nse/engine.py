# nse/engine.py
"""Linear NSE transform over wrapping 64-bit integers."""
import numpy as np
from .params import DTYPE, WIDE_DTYPE
from .errors import NotPositiveDataLengthError, DifferentIVLengthError, DegenerateKeyError
from .bits import bytes_as_signed, signed_as_bytes

# -----------------------------
# Validation Gate
# -----------------------------
def check_data_length(data_length: int, buffer_name: str = "Data"):
    if data_length < 1:
        raise NotPositiveDataLengthError(buffer_name)

def check_ciphertext_lengths(data_length: int, iv_length: int):
    check_data_length(data_length, "Ciphertext")
    if data_length != iv_length:
        raise DifferentIVLengthError(iv_length, data_length)

def _check_derived_key(dk64: np.ndarray):
    if not dk64.any():
        raise DegenerateKeyError("Derived key must contain a non-zero element")

# -----------------------------
# Fixed-width helpers
# -----------------------------
def widen(x) -> np.ndarray:
    """Sign-extend an int8 vector to int64."""
    return np.asarray(x, dtype=DTYPE).astype(WIDE_DTYPE)

def doubled(x: np.ndarray) -> np.ndarray:
    return np.left_shift(x, 1)

def truncating_divide(a: np.ndarray, b) -> np.ndarray:
    # numpy floors; step quotients of inexact, opposite-sign divisions back toward zero
    q = np.floor_divide(a, b)
    inexact = (a - q * b) != 0
    return q + (inexact & ((a < 0) != (b < 0)))

# -----------------------------
# Forward / Inverse Transform
# -----------------------------
def linear_encrypt(rotated: bytes, iv, derived_key) -> tuple[np.ndarray, np.ndarray]:
    """
    Mix rotated plaintext bytes with the IV and derived key.

    Args:
        rotated: Rotated plaintext, reinterpreted as signed bytes
        iv: n signed bytes
        derived_key: n signed bytes

    Returns:
        Tuple of (ciphertext, iv) where ciphertext holds n int64 values
        and iv is returned unchanged.

    Raises:
        NotPositiveDataLengthError: If rotated is empty
        DegenerateKeyError: If derived_key is all zero
    """
    check_data_length(len(rotated))
    rot64 = widen(bytes_as_signed(rotated))
    iv64 = widen(iv)
    dk64 = widen(derived_key)
    _check_derived_key(dk64)

    with np.errstate(over="ignore"):
        sum1 = np.sum(dk64 * dk64, dtype=WIDE_DTYPE)
        sum2 = np.sum(dk64 * (rot64 - iv64), dtype=WIDE_DTYPE)
        ciphertext = rot64 * sum1 - doubled(dk64 * sum2)
    return ciphertext, iv

def linear_decrypt(ciphertext, iv, derived_key) -> bytes:
    """
    Invert linear_encrypt. Returns the rotated plaintext bytes.

    The iv and derived_key are trusted to match the encryption call;
    mismatched values yield wrong bytes rather than an error.
    """
    check_ciphertext_lengths(len(ciphertext), len(iv))
    c64 = np.asarray(ciphertext, dtype=WIDE_DTYPE)
    iv64 = widen(iv)
    dk64 = widen(derived_key)
    _check_derived_key(dk64)

    with np.errstate(over="ignore"):
        sum1 = np.sum(dk64 * dk64, dtype=WIDE_DTYPE)
        sum2 = np.sum(dk64 * c64, dtype=WIDE_DTYPE)
        sum3 = np.sum(dk64 * iv64, dtype=WIDE_DTYPE)
        sum1_square = sum1 * sum1
        if sum1_square == 0:
            raise DegenerateKeyError("Squared key norm wraps to zero in 64 bits")
        numerator = (c64 + doubled(dk64 * sum3)) * sum1 - doubled(dk64 * sum2)
        rotated = truncating_divide(numerator, sum1_square)
    return signed_as_bytes(rotated.astype(DTYPE))
