# nse/public_api.py
import logging
from typing import Optional
import numpy as np
from .params import NseParams
from .bits import right_rotate, left_rotate
from .engine import check_data_length, check_ciphertext_lengths, linear_encrypt, linear_decrypt
from .key_schedule import derive_key, generate_iv
from .serialization import write_ciphertext_json, read_ciphertext
from .utils import generate_salt

logger = logging.getLogger(__name__)

def encrypt_with_already_derived_key(data: bytes, derived_key: np.ndarray, bits_to_rotate: int, bytes_to_rotate: int, params: NseParams = NseParams()) -> tuple[np.ndarray, np.ndarray]:
    """Encrypt data with derived key material, returning (ciphertext, iv)."""
    check_data_length(len(data))
    rotated = right_rotate(data, bits_to_rotate, bytes_to_rotate)
    iv = generate_iv(len(data), rotated, derived_key, params)
    return linear_encrypt(rotated, iv, derived_key)

def encrypt(data: bytes, salt: bytes, key: int, params: NseParams = NseParams()) -> tuple[np.ndarray, np.ndarray]:
    """
    Encrypt data under key and salt.

    Raises:
        NotPositiveKeyError: If key <= 0
        NotPositiveDataLengthError: If data is empty
    """
    check_data_length(len(data))
    bits_to_rotate, bytes_to_rotate, derived_key = derive_key(key, salt, len(data), params)
    logger.debug("Derived rotation: %d bits over %d-byte chunks", bits_to_rotate, bytes_to_rotate)
    return encrypt_with_already_derived_key(data, derived_key, bits_to_rotate, bytes_to_rotate, params)

def decrypt_with_already_derived_key(ciphertext, iv, derived_key: np.ndarray, bits_to_rotate: int, bytes_to_rotate: int) -> bytes:
    rotated = linear_decrypt(ciphertext, iv, derived_key)
    return left_rotate(rotated, bits_to_rotate, bytes_to_rotate)

def decrypt(ciphertext, salt: bytes, iv, key: int, params: NseParams = NseParams()) -> bytes:
    """
    Decrypt ciphertext produced by encrypt with the same salt and key.

    Raises:
        NotPositiveDataLengthError: If ciphertext is empty
        DifferentIVLengthError: If len(iv) != len(ciphertext)
        NotPositiveKeyError: If key <= 0
    """
    check_ciphertext_lengths(len(ciphertext), len(iv))
    bits_to_rotate, bytes_to_rotate, derived_key = derive_key(key, salt, len(ciphertext), params)
    return decrypt_with_already_derived_key(ciphertext, iv, derived_key, bits_to_rotate, bytes_to_rotate)

# -----------------------------
# File helpers
# -----------------------------
def encrypt_file(data: bytes, key: int, out_file: str = "enc_nse.json", salt: Optional[bytes] = None, params: NseParams = NseParams()) -> str:
    salt = salt if salt is not None else generate_salt(params)
    ciphertext, iv = encrypt(data, salt, key, params)
    write_ciphertext_json(out_file, ciphertext, iv, salt, params)
    return out_file

def decrypt_file(enc_file: str, key: int) -> bytes:
    ciphertext, iv, salt, params = read_ciphertext(enc_file)
    plaintext = decrypt(ciphertext, salt, iv, key, params)
    logger.info("Decrypted %d bytes from %s", len(plaintext), enc_file)
    return plaintext
