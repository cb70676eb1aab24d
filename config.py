"""
Configuration for the Crypto Tool local API.

The command-line tool does not read any of this; it always uses the
default scrypt parameters.
"""

import os
from dataclasses import dataclass

from cryptotool import KdfParams

# Application version - update this for each release
VERSION = "1.0.0"


@dataclass
class Config:
    """Application configuration."""

    # Server settings
    HOST: str = os.getenv("CRYPTO_TOOL_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("CRYPTO_TOOL_PORT", "18422"))

    # Logging
    LOG_LEVEL: str = os.getenv("CRYPTO_TOOL_LOG_LEVEL", "info")

    # Cryptographic settings ("scrypt" keeps envelopes compatible with the CLI)
    KDF_ALGORITHM: str = os.getenv("CRYPTO_TOOL_KDF", "scrypt")

    @property
    def kdf_params(self) -> KdfParams:
        """Key derivation settings for the API's TextCipher."""
        return KdfParams(algorithm=self.KDF_ALGORITHM)


# Global config instance
config = Config()
