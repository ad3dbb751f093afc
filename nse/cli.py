import sys
import logging
import argparse
from .params import NseParams, bcolors
from .utils import generate_salt
from .public_api import encrypt_file, decrypt_file

logger = logging.getLogger(__name__)

def parse_key(text: str) -> int:
    """Accepts decimal or 0x-prefixed hex."""
    return int(text, 0)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NSE - linear symmetric cipher over wrapping 64-bit integers")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable info logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Subparser for encryption
    encrypt_parser = subparsers.add_parser("encrypt", help="Encrypt a message or file")
    encrypt_parser.add_argument("--key", type=parse_key, required=True, help="Positive integer key")
    encrypt_parser.add_argument("--salt", help="Salt as hex (random if omitted)")
    source = encrypt_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--message", help="Text message")
    source.add_argument("--in_path", help="Input file path")
    encrypt_parser.add_argument("--out_file", default="enc_nse.json", help="Output encrypted file")
    encrypt_parser.add_argument("--kdf_iterations", type=int, default=NseParams.kdf_iterations, help="PBKDF2 iterations")
    encrypt_parser.add_argument("--max_bytes_to_rotate", type=int, default=NseParams.max_bytes_to_rotate, help="Largest rotation chunk in bytes")

    # Subparser for decryption
    decrypt_parser = subparsers.add_parser("decrypt", help="Decrypt an encrypted file")
    decrypt_parser.add_argument("--key", type=parse_key, required=True, help="Positive integer key")
    decrypt_parser.add_argument("--enc_file", default="enc_nse.json", help="Encrypted file")
    decrypt_parser.add_argument("--out_path", help="Write plaintext here instead of printing it")

    # Subparser for salt generation
    salt_parser = subparsers.add_parser("salt", help="Print a random salt as hex")
    salt_parser.add_argument("--salt_len", type=int, default=NseParams.salt_len, help="Salt length in bytes")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        match args.command:
            case "encrypt":
                params = NseParams(kdf_iterations=args.kdf_iterations, max_bytes_to_rotate=args.max_bytes_to_rotate)
                if args.in_path:
                    with open(args.in_path, "rb") as f:
                        data = f.read()
                else:
                    data = args.message.encode("utf-8")
                salt = bytes.fromhex(args.salt) if args.salt else None
                out_file = encrypt_file(data, args.key, args.out_file, salt, params)
                print(f"{bcolors.OKGREEN}Encrypted to {out_file}{bcolors.ENDC}")
            case "decrypt":
                plaintext = decrypt_file(args.enc_file, args.key)
                if args.out_path:
                    with open(args.out_path, "wb") as f:
                        f.write(plaintext)
                    print(f"{bcolors.OKGREEN}Decrypted to {args.out_path}{bcolors.ENDC}")
                else:
                    print("Decrypted message:", plaintext.decode("utf-8", errors="replace"))
            case "salt":
                print(generate_salt(NseParams(salt_len=args.salt_len)).hex())
    except Exception as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        sys.exit(1)

if __name__ == "__main__":
    main()
