# nse/utils.py
import hashlib
import secrets
from .params import NseParams

def shake(expand_bytes: int, *chunks: bytes) -> bytes:
    xof = hashlib.shake_256()
    for c in chunks:
        xof.update(len(c).to_bytes(4, 'big'))
        xof.update(c)
    return xof.digest(expand_bytes)

def generate_salt(params: NseParams = NseParams()) -> bytes:
    return secrets.token_bytes(params.salt_len)

def int_to_bytes_be(n: int) -> bytes:
    return n.to_bytes((n.bit_length() + 7) // 8, "big")

