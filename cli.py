"""
Crypto Tool - command-line entry point.

Usage: crypto-tool <operation> <passphrase> <text> [variant]
"""

import sys
import logging

from cryptotool import DEFAULT_VARIANT, SUPPORTED_VARIANTS, CryptoToolError, Operation, TextCipher

USAGE = f"""
Usage: crypto-tool <operation> <passphrase> <text> [variant]

Parameters:
  operation   - "encrypt" or "decrypt"
  passphrase  - Your passphrase for encryption/decryption
  text        - Text to encrypt or decrypt
  variant     - (Optional) Cipher variant (default: {DEFAULT_VARIANT})
                Supported: {", ".join(SUPPORTED_VARIANTS)}

Examples:
  Encrypt:
    crypto-tool encrypt myPassphrase "Hello, World!"

  Decrypt:
    crypto-tool decrypt myPassphrase "iv:ciphertext:tag"

  Encrypt with a different variant:
    crypto-tool encrypt myPassphrase "Hello, World!" aes-192-gcm
"""


def print_usage(stream=None):
    """Print usage instructions."""
    print(USAGE, file=stream or sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the requested operation and return the exit code."""
    args = sys.argv[1:] if argv is None else argv

    logging.basicConfig(level=logging.ERROR, format="%(levelname)s %(name)s: %(message)s")

    if len(args) == 1 and args[0] in ("-h", "--help"):
        print_usage(sys.stdout)
        return 0

    if len(args) < 3 or len(args) > 4:
        print_usage()
        return 1

    operation_name, passphrase, text = args[:3]
    variant = args[3] if len(args) == 4 else DEFAULT_VARIANT

    try:
        operation = Operation.parse(operation_name)
    except CryptoToolError as e:
        print(str(e), file=sys.stderr)
        print_usage()
        return 1

    try:
        result = TextCipher().run(operation, passphrase, text, variant)
    except CryptoToolError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
