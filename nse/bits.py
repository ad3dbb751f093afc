# nse/bits.py
import numpy as np
from .params import DTYPE

# -----------------------------
# Sign reinterpretation
# -----------------------------
def as_signed(b: int) -> int:
    """Two's-complement view of an unsigned byte."""
    return b - 256 if b > 127 else b

def as_unsigned(v: int) -> int:
    return v & 0xFF

def bytes_as_signed(data: bytes) -> np.ndarray:
    return np.frombuffer(bytes(data), dtype=DTYPE).copy()

def signed_as_bytes(x: np.ndarray) -> bytes:
    return np.asarray(x, dtype=DTYPE).view(np.uint8).tobytes()

# -----------------------------
# Chunked bit rotation
# -----------------------------
def _rotate_chunk(chunk: bytes, bits: int, right: bool) -> bytes:
    width = 8 * len(chunk)
    shift = bits % width
    if shift == 0:
        return chunk
    if not right:
        shift = width - shift
    value = int.from_bytes(chunk, "big")
    mask = (1 << width) - 1
    value = ((value >> shift) | (value << (width - shift))) & mask
    return value.to_bytes(len(chunk), "big")

def _rotate(data: bytes, bits_to_rotate: int, bytes_to_rotate: int, right: bool) -> bytes:
    if bytes_to_rotate < 1:
        raise ValueError("bytes_to_rotate must be positive")
    return b"".join(
        _rotate_chunk(data[i:i + bytes_to_rotate], bits_to_rotate, right)
        for i in range(0, len(data), bytes_to_rotate)
    )

def right_rotate(data: bytes, bits_to_rotate: int, bytes_to_rotate: int) -> bytes:
    """Rotate every bytes_to_rotate-wide chunk right by bits_to_rotate bits.

    The trailing chunk may be shorter and is rotated within its own width.
    """
    return _rotate(data, bits_to_rotate, bytes_to_rotate, right=True)

def left_rotate(data: bytes, bits_to_rotate: int, bytes_to_rotate: int) -> bytes:
    return _rotate(data, bits_to_rotate, bytes_to_rotate, right=False)
