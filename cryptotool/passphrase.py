"""
Passphrase derivation.

Turns a passphrase into a key of the length a cipher variant needs.
scrypt is the default; Argon2id is available when selected explicitly.
The salt is a fixed constant, so the same passphrase always yields the
same key and envelopes stay compatible across installations.
"""

import logging
from dataclasses import dataclass

from argon2.low_level import hash_secret_raw, Type
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from .errors import InvalidInput

logger = logging.getLogger(__name__)

KEY_LENGTHS = (16, 24, 32)

SCRYPT_SALT = b"salt"
ARGON2_SALT = b"crypto-tool-argon2id"  # Argon2 needs at least 8 bytes


@dataclass(frozen=True)
class KdfParams:
    """Key derivation settings, fixed for the lifetime of a deriver."""
    algorithm: str = "scrypt"
    salt: bytes | None = None  # None selects the algorithm's fixed salt

    # scrypt
    scrypt_n: int = 16384
    scrypt_r: int = 8
    scrypt_p: int = 1

    # Argon2id (OWASP recommended)
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536  # 64 MB
    argon2_parallelism: int = 4

    @property
    def effective_salt(self) -> bytes:
        if self.salt is not None:
            return self.salt
        return ARGON2_SALT if self.algorithm == "argon2id" else SCRYPT_SALT


class PassphraseDeriver:
    """Derives encryption keys from passphrases."""

    ALGORITHMS = ("scrypt", "argon2id")

    def __init__(self, params: KdfParams | None = None):
        """
        Initialize the deriver.

        Args:
            params: KDF settings. Defaults to scrypt with the fixed salt.

        Raises:
            InvalidInput: If the algorithm is unknown or the salt is unusable
        """
        self.params = params or KdfParams()

        if self.params.algorithm not in self.ALGORITHMS:
            raise InvalidInput(f"Unknown key derivation algorithm '{self.params.algorithm}'")
        if self.params.algorithm == "argon2id" and len(self.params.effective_salt) < 8:
            raise InvalidInput("Argon2id salt must be at least 8 bytes")

    def derive(self, passphrase: str, key_length: int = 32) -> bytes:
        """
        Derive a key from a passphrase.

        Args:
            passphrase: The user's passphrase
            key_length: Output length in bytes, one of 16, 24 or 32

        Returns:
            The derived key

        Raises:
            InvalidInput: If the passphrase is empty or the length is unsupported
        """
        if not passphrase:
            raise InvalidInput("Passphrase is required.")
        if key_length not in KEY_LENGTHS:
            raise InvalidInput(f"Key length must be one of {KEY_LENGTHS}, got {key_length}")

        logger.debug(f"Deriving {key_length * 8}-bit key with {self.params.algorithm}")

        secret = passphrase.encode("utf-8")
        if self.params.algorithm == "argon2id":
            return hash_secret_raw(
                secret=secret,
                salt=self.params.effective_salt,
                time_cost=self.params.argon2_time_cost,
                memory_cost=self.params.argon2_memory_cost,
                parallelism=self.params.argon2_parallelism,
                hash_len=key_length,
                type=Type.ID,
            )

        kdf = Scrypt(
            salt=self.params.effective_salt,
            length=key_length,
            n=self.params.scrypt_n,
            r=self.params.scrypt_r,
            p=self.params.scrypt_p,
        )
        return kdf.derive(secret)
