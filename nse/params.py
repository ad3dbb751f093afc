from dataclasses import dataclass
import numpy as np

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

DTYPE = np.int8         # IV and derived key elements
WIDE_DTYPE = np.int64   # ciphertext and widened arithmetic
ZERO = 0
MAX_VARINT_LEN = 10     # zig-zag LEB128 of any int64

@dataclass(frozen=True)
class NseParams:
    salt_len: int = 16
    kdf_iterations: int = 100000
    max_bytes_to_rotate: int = 8
    iv_nonce_len: int = 16
