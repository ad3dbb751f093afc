# nse/__init__.py
from .params import DTYPE, WIDE_DTYPE, ZERO, NseParams
from .errors import (
    NseError,
    NotPositiveDataLengthError,
    DifferentIVLengthError,
    WrongDataFormatError,
    NotPositiveKeyError,
    DegenerateKeyError,
)
from .bits import as_signed, as_unsigned, right_rotate, left_rotate
from .utils import shake, generate_salt, int_to_bytes_be
from .key_schedule import derive_key, generate_iv
from .engine import linear_encrypt, linear_decrypt
from .conversion import (
    int64_to_bytes, int64s_to_bytes, bytes_to_int64s,
    int8s_to_bytes, bytes_to_int8s,
)
from .serialization import write_ciphertext_json, read_ciphertext
from .public_api import (
    encrypt, decrypt,
    encrypt_with_already_derived_key, decrypt_with_already_derived_key,
    encrypt_file, decrypt_file,
)

__version__ = "1.0.0"
