"""
Exception hierarchy for the crypto tool.

Every failure surfaced to a caller is a CryptoToolError subclass.
"""


class CryptoToolError(Exception):
    """Base class for all crypto tool failures."""


class InvalidInput(CryptoToolError):
    """Empty passphrase or text, bad arguments, or a key of the wrong length."""


class MalformedEnvelope(CryptoToolError):
    """Envelope is not three colon-delimited hex fields."""


class AuthenticationFailed(CryptoToolError):
    """Tag verification failed during decryption."""

    def __init__(self, message: str = "Decryption failed"):
        super().__init__(message)


class UnsupportedVariant(CryptoToolError):
    """Variant name maps to no known cipher."""
