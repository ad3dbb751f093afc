# nse/conversion.py
"""
Byte encodings for NSE vectors.

Ciphertext integers are written as [length:1][varint:length] blocks, where
the varint is zig-zag LEB128. IV and derived key vectors are written one
byte per element.
"""

import numpy as np
from .params import WIDE_DTYPE, MAX_VARINT_LEN
from .errors import WrongDataFormatError
from .bits import bytes_as_signed, signed_as_bytes

_MASK64 = (1 << 64) - 1


def int64_to_bytes(integer: int) -> bytes:
    """Shortest varint encoding of a signed 64-bit integer."""
    integer = int(integer)
    zigzag = ((integer << 1) ^ (integer >> 63)) & _MASK64
    out = bytearray()
    while zigzag >= 0x80:
        out.append((zigzag & 0x7F) | 0x80)
        zigzag >>= 7
    out.append(zigzag)
    return bytes(out)


def bytes_to_int64(payload: bytes) -> int:
    if not payload or len(payload) > MAX_VARINT_LEN:
        raise WrongDataFormatError(f"Invalid varint length: {len(payload)}")
    zigzag = 0
    for shift, b in enumerate(payload):
        last = shift == len(payload) - 1
        if bool(b & 0x80) == last:
            raise WrongDataFormatError("Malformed varint continuation bits")
        zigzag |= (b & 0x7F) << (7 * shift)
    if zigzag > _MASK64:
        raise WrongDataFormatError("Varint overflows 64 bits")
    return (zigzag >> 1) ^ -(zigzag & 1)


def int64s_to_bytes(data) -> bytes:
    """For each integer write one byte holding its payload size, then the payload."""
    out = bytearray()
    for integer in np.asarray(data, dtype=WIDE_DTYPE).tolist():
        payload = int64_to_bytes(integer)
        out.append(len(payload))
        out += payload
    return bytes(out)


def bytes_to_int64s(data: bytes) -> np.ndarray:
    """
    Parse the output of int64s_to_bytes.

    Raises:
        WrongDataFormatError: If a block runs past the end of data or
            holds an invalid varint
    """
    result = []
    index = 0
    data_length = len(data)
    while index < data_length:
        next_index = index + data[index] + 1
        if next_index > data_length:
            raise WrongDataFormatError(
                f"Block at offset {index} needs {data[index]} bytes, {data_length - index - 1} left"
            )
        result.append(bytes_to_int64(data[index + 1:next_index]))
        index = next_index
    return np.array(result, dtype=WIDE_DTYPE)


def int8s_to_bytes(data) -> bytes:
    return signed_as_bytes(data)


def bytes_to_int8s(data: bytes) -> np.ndarray:
    return bytes_as_signed(data)
