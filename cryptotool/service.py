"""
One-shot text encryption on top of the passphrase deriver and envelope codec.
"""

import logging
from enum import Enum

from .envelope import EnvelopeCodec
from .errors import InvalidInput
from .passphrase import KdfParams, PassphraseDeriver
from .variants import DEFAULT_VARIANT, resolve_variant

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    """Operations a caller can request."""
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def parse(cls, value: str) -> "Operation":
        try:
            return cls(value)
        except ValueError:
            raise InvalidInput('Invalid operation. Must be "encrypt" or "decrypt".') from None


class TextCipher:
    """Encrypts and decrypts text with a passphrase."""

    def __init__(self, kdf_params: KdfParams | None = None):
        """
        Initialize the text cipher.

        Args:
            kdf_params: Key derivation settings (scrypt defaults if omitted)
        """
        self.deriver = PassphraseDeriver(kdf_params)

    def encrypt_text(self, passphrase: str, text: str, variant: str | None = DEFAULT_VARIANT) -> str:
        """
        Encrypt text and return the envelope string.

        Args:
            passphrase: The user's passphrase
            text: Text to encrypt
            variant: Cipher variant name

        Returns:
            The envelope as nonce:ciphertext:tag
        """
        cipher_variant = resolve_variant(variant)
        if not text:
            raise InvalidInput("Text to encrypt is required.")

        key = bytearray(self.deriver.derive(passphrase, cipher_variant.key_length))
        try:
            envelope = EnvelopeCodec.encrypt(text.encode("utf-8"), key, cipher_variant)
        finally:
            _wipe(key)
        return envelope.to_string()

    def decrypt_text(self, passphrase: str, envelope: str, variant: str | None = DEFAULT_VARIANT) -> str:
        """
        Decrypt an envelope string back to text.

        Args:
            passphrase: The passphrase used at encryption time
            envelope: Envelope string as returned by encrypt_text
            variant: Cipher variant name used at encryption time

        Returns:
            The original text
        """
        cipher_variant = resolve_variant(variant)
        if not envelope:
            raise InvalidInput("Encrypted text is required.")

        key = bytearray(self.deriver.derive(passphrase, cipher_variant.key_length))
        try:
            plaintext = EnvelopeCodec.decrypt(envelope, key, cipher_variant)
        finally:
            _wipe(key)

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidInput("Decrypted payload is not valid UTF-8 text.") from None

    def run(self, operation: Operation, passphrase: str, text: str, variant: str | None = DEFAULT_VARIANT) -> str:
        """Dispatch a single encrypt or decrypt request."""
        handlers = {
            Operation.ENCRYPT: self.encrypt_text,
            Operation.DECRYPT: self.decrypt_text,
        }
        logger.debug(f"Running {operation.value} with {variant or DEFAULT_VARIANT}")
        return handlers[operation](passphrase, text, variant)


def _wipe(buffer: bytearray) -> None:
    """Zero a key buffer in place."""
    for i in range(len(buffer)):
        buffer[i] = 0
