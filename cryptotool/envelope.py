"""
AEAD envelope encryption.

Encrypts text payloads with AES-GCM under a passphrase-derived key and
packs the result as a single string:

    hex(nonce):hex(ciphertext):hex(tag)

A fresh 16-byte nonce is drawn for every encryption. Decryption verifies
the 16-byte tag before any plaintext is returned.
"""

import os
import logging
import binascii
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import AuthenticationFailed, InvalidInput, MalformedEnvelope
from .variants import CipherVariant

logger = logging.getLogger(__name__)

SEPARATOR = ":"


@dataclass(frozen=True)
class Envelope:
    """An encrypted payload ready to hand to the decrypting party."""
    nonce: bytes
    ciphertext: bytes
    tag: bytes

    def to_string(self) -> str:
        """Render as lowercase hex fields joined by colons."""
        return SEPARATOR.join((self.nonce.hex(), self.ciphertext.hex(), self.tag.hex()))

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_string(cls, text: str) -> "Envelope":
        """
        Parse an envelope string.

        Args:
            text: Envelope in the form nonce:ciphertext:tag

        Returns:
            The parsed Envelope

        Raises:
            MalformedEnvelope: If the text is not three hex fields with a
                16-byte nonce and a 16-byte tag
        """
        parts = text.split(SEPARATOR)
        if len(parts) != 3:
            raise MalformedEnvelope("Invalid encrypted text format. Expected format: iv:encrypted:tag")

        try:
            nonce, ciphertext, tag = (binascii.unhexlify(part) for part in parts)
        except ValueError as e:
            raise MalformedEnvelope(f"Invalid hex in encrypted text: {e}") from e

        envelope = cls(nonce=nonce, ciphertext=ciphertext, tag=tag)
        envelope.validate()
        return envelope

    def validate(self) -> None:
        """Raise MalformedEnvelope unless the nonce and tag are 16 bytes each."""
        if len(self.nonce) != EnvelopeCodec.NONCE_LEN:
            raise MalformedEnvelope(f"IV must be {EnvelopeCodec.NONCE_LEN} bytes, got {len(self.nonce)}")
        if len(self.tag) != EnvelopeCodec.TAG_LEN:
            raise MalformedEnvelope(f"Tag must be {EnvelopeCodec.TAG_LEN} bytes, got {len(self.tag)}")


class EnvelopeCodec:
    """Encrypts payloads into envelopes and back."""

    NONCE_LEN = 16  # 128 bits
    TAG_LEN = 16

    @staticmethod
    def _check_key(key: bytes, variant: CipherVariant) -> None:
        if len(key) != variant.key_length:
            raise InvalidInput(
                f"Invalid key length for {variant.name}: "
                f"expected {variant.key_length} bytes, got {len(key)}"
            )

    @classmethod
    def encrypt(cls, plaintext: bytes, key: bytes, variant: CipherVariant) -> Envelope:
        """
        Encrypt a payload.

        Args:
            plaintext: Bytes to encrypt (must be non-empty)
            key: Key derived for this variant
            variant: The cipher variant

        Returns:
            Envelope holding the nonce, ciphertext and tag
        """
        if not plaintext:
            raise InvalidInput("Text to encrypt is required.")
        cls._check_key(key, variant)

        nonce = os.urandom(cls.NONCE_LEN)
        sealed = AESGCM(key).encrypt(nonce, plaintext, None)

        logger.debug(f"Encrypted {len(plaintext)} bytes with {variant.name}")

        # AESGCM appends the tag to the ciphertext
        return Envelope(
            nonce=nonce,
            ciphertext=sealed[:-cls.TAG_LEN],
            tag=sealed[-cls.TAG_LEN:],
        )

    @classmethod
    def decrypt(cls, envelope: str | Envelope, key: bytes, variant: CipherVariant) -> bytes:
        """
        Decrypt an envelope.

        Args:
            envelope: Envelope string or parsed Envelope
            key: Key derived for this variant
            variant: The cipher variant

        Returns:
            The original plaintext bytes

        Raises:
            MalformedEnvelope: If the envelope cannot be parsed
            InvalidInput: If the key length does not match the variant
            AuthenticationFailed: If the tag does not verify
        """
        if isinstance(envelope, str):
            if not envelope:
                raise InvalidInput("Encrypted text is required.")
            envelope = Envelope.from_string(envelope)
        else:
            envelope.validate()
        cls._check_key(key, variant)

        try:
            plaintext = AESGCM(key).decrypt(envelope.nonce, envelope.ciphertext + envelope.tag, None)
        except InvalidTag:
            logger.warning("Envelope failed authentication")
            raise AuthenticationFailed() from None
        except (TypeError, ValueError) as e:
            raise MalformedEnvelope(f"Invalid envelope: {e}") from e

        logger.debug(f"Decrypted {len(plaintext)} bytes with {variant.name}")
        return plaintext
