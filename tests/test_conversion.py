# file: tests/test_conversion.py

import numpy as np
import pytest

from nse.conversion import (
    int64_to_bytes,
    bytes_to_int64,
    int64s_to_bytes,
    bytes_to_int64s,
    int8s_to_bytes,
    bytes_to_int8s,
)
from nse.errors import WrongDataFormatError


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class TestInt64Varint:

    @pytest.mark.parametrize("value, encoded", [
        (0, b"\x00"),
        (-1, b"\x01"),
        (1, b"\x02"),
        (63, b"\x7e"),
        (64, b"\x80\x01"),
        (-65, b"\x81\x01"),
    ])
    def test_known_encodings(self, value, encoded):
        assert int64_to_bytes(value) == encoded
        assert bytes_to_int64(encoded) == value

    def test_extremes(self):
        for value in (INT64_MIN, INT64_MAX):
            encoded = int64_to_bytes(value)
            assert len(encoded) == 10
            assert bytes_to_int64(encoded) == value

    def test_rejects_trailing_continuation(self):
        with pytest.raises(WrongDataFormatError):
            bytes_to_int64(b"\x80")

    def test_rejects_early_terminator(self):
        with pytest.raises(WrongDataFormatError):
            bytes_to_int64(b"\x01\x01")

    def test_rejects_empty_payload(self):
        with pytest.raises(WrongDataFormatError):
            bytes_to_int64(b"")


class TestInt64Blocks:

    def test_roundtrip(self):
        rng = np.random.default_rng(7)
        data = rng.integers(INT64_MIN, INT64_MAX, size=200, dtype=np.int64, endpoint=True)
        data[:4] = [0, -1, INT64_MIN, INT64_MAX]
        decoded = bytes_to_int64s(int64s_to_bytes(data))
        assert decoded.dtype == np.int64
        assert np.array_equal(decoded, data)

    def test_block_layout(self):
        assert int64s_to_bytes([0, 64, -1]) == b"\x01\x00" + b"\x02\x80\x01" + b"\x01\x01"

    def test_empty(self):
        assert int64s_to_bytes([]) == b""
        assert bytes_to_int64s(b"").tolist() == []

    def test_truncated_block(self):
        encoded = int64s_to_bytes([123456789, -987654321])
        with pytest.raises(WrongDataFormatError):
            bytes_to_int64s(encoded[:-1])

    def test_length_byte_past_end(self):
        with pytest.raises(WrongDataFormatError):
            bytes_to_int64s(b"\x08\x01\x02")

    def test_zero_length_block(self):
        with pytest.raises(WrongDataFormatError):
            bytes_to_int64s(b"\x00")


class TestInt8Vectors:

    def test_sign_reinterpretation(self):
        assert int8s_to_bytes(np.array([-1, 0, 127, -128], dtype=np.int8)) == b"\xff\x00\x7f\x80"
        assert bytes_to_int8s(b"\xff\x00\x7f\x80").tolist() == [-1, 0, 127, -128]

    def test_all_bytes(self):
        data = bytes(range(256))
        assert int8s_to_bytes(bytes_to_int8s(data)) == data
