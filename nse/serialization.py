import json
import logging
from base64 import b64encode, b64decode
from .params import NseParams
from .errors import WrongDataFormatError
from .conversion import int64s_to_bytes, bytes_to_int64s, int8s_to_bytes, bytes_to_int8s

logger = logging.getLogger(__name__)

# -----------------------------
# Serialization Helpers
# -----------------------------
def write_ciphertext_json(path: str, ciphertext, iv, salt: bytes, params: NseParams):
    payload = {
        "nse_metadata": {
            "n": len(ciphertext),
            "kdf_iterations": params.kdf_iterations,
            "max_bytes_to_rotate": params.max_bytes_to_rotate,
        },
        "salt": b64encode(salt).decode(),
        "iv": b64encode(int8s_to_bytes(iv)).decode(),
        "ciphertext": b64encode(int64s_to_bytes(ciphertext)).decode(),
    }
    with open(path, "w") as f:
        json.dump(payload, f)
    logger.info("Wrote %d ciphertext elements to %s", len(ciphertext), path)

def read_ciphertext(path: str):
    """Returns (ciphertext, iv, salt, params) stored at path."""
    with open(path, "r") as f:
        try:
            payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise WrongDataFormatError(f"{path} is not valid JSON: {e}") from e
    try:
        metadata = payload["nse_metadata"]
        salt = b64decode(payload["salt"], validate=True)
        iv = bytes_to_int8s(b64decode(payload["iv"], validate=True))
        ciphertext = bytes_to_int64s(b64decode(payload["ciphertext"], validate=True))
        params = NseParams(
            kdf_iterations=int(metadata["kdf_iterations"]),
            max_bytes_to_rotate=int(metadata["max_bytes_to_rotate"]),
        )
        n = int(metadata["n"])
    except (KeyError, TypeError, ValueError) as e:
        raise WrongDataFormatError(f"Malformed ciphertext file {path}: {e}") from e
    if n != len(ciphertext):
        raise WrongDataFormatError(f"Metadata declares {n} elements, found {len(ciphertext)}")
    logger.debug("Read %d ciphertext elements from %s", n, path)
    return ciphertext, iv, salt, params
