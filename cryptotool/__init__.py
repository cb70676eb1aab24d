"""
Passphrase-based authenticated encryption for text payloads.

Handles:
- Passphrase derivation (scrypt, optional Argon2id)
- Envelope encryption (AES-GCM, hex nonce:ciphertext:tag)
- One-shot encrypt/decrypt of text
"""

from .errors import (
    AuthenticationFailed,
    CryptoToolError,
    InvalidInput,
    MalformedEnvelope,
    UnsupportedVariant,
)
from .envelope import Envelope, EnvelopeCodec
from .passphrase import KdfParams, PassphraseDeriver
from .service import Operation, TextCipher
from .variants import DEFAULT_VARIANT, SUPPORTED_VARIANTS, CipherVariant, resolve_variant

__all__ = [
    "AuthenticationFailed",
    "CryptoToolError",
    "InvalidInput",
    "MalformedEnvelope",
    "UnsupportedVariant",
    "Envelope",
    "EnvelopeCodec",
    "KdfParams",
    "PassphraseDeriver",
    "Operation",
    "TextCipher",
    "DEFAULT_VARIANT",
    "SUPPORTED_VARIANTS",
    "CipherVariant",
    "resolve_variant",
]
