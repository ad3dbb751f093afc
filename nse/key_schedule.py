# nse/key_schedule.py
import secrets
import numpy as np
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives import hashes
from .params import ZERO, DTYPE, NseParams
from .errors import NotPositiveKeyError
from .bits import bytes_as_signed
from .utils import shake, int_to_bytes_be

# -----------------------------
# Key Derivation
# -----------------------------
def derive_key(key: int, salt: bytes, data_length: int, params: NseParams = NseParams()) -> tuple[int, int, np.ndarray]:
    """
    Stretch a positive integer key over salt into rotation parameters
    and data_length signed bytes of key material.

    Returns (bits_to_rotate, bytes_to_rotate, derived_key).
    """
    if key <= ZERO:
        raise NotPositiveKeyError(f"Key must be positive, got {key}")
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=data_length + 2,
        salt=salt,
        iterations=params.kdf_iterations,
    )
    stream = kdf.derive(int_to_bytes_be(key))
    bits_to_rotate = stream[0]
    bytes_to_rotate = stream[1] % max(1, min(data_length, params.max_bytes_to_rotate)) + 1
    derived_key = bytes_as_signed(stream[2:])
    if not derived_key.any():
        derived_key[-1] = 1
    return bits_to_rotate, bytes_to_rotate, derived_key

# -----------------------------
# IV Generation
# -----------------------------
def generate_iv(data_length: int, rotated: bytes, derived_key: np.ndarray, params: NseParams = NseParams()) -> np.ndarray:
    nonce = secrets.token_bytes(params.iv_nonce_len)
    raw = shake(data_length, nonce, bytes(rotated), np.asarray(derived_key, dtype=DTYPE).tobytes())
    return bytes_as_signed(raw)
