"""
Cipher variants supported by the envelope codec.

A variant name selects the AEAD algorithm and, from its designator,
the key length the caller must derive.
"""

from dataclasses import dataclass

from .errors import UnsupportedVariant

DEFAULT_VARIANT = "aes-256-gcm"


@dataclass(frozen=True)
class CipherVariant:
    """A named AEAD configuration."""
    name: str
    key_length: int


def key_length_for(name: str) -> int:
    """Key length in bytes implied by a variant name."""
    if "256" in name:
        return 32
    if "192" in name:
        return 24
    return 16


SUPPORTED_VARIANTS: dict[str, CipherVariant] = {
    name: CipherVariant(name, key_length_for(name))
    for name in ("aes-256-gcm", "aes-192-gcm", "aes-128-gcm")
}


def resolve_variant(name: str | None) -> CipherVariant:
    """
    Look up a cipher variant by name.

    Args:
        name: Variant name such as "aes-256-gcm" (case-insensitive).
            None or an empty string selects the default.

    Returns:
        The matching CipherVariant

    Raises:
        UnsupportedVariant: If the name is not a supported cipher
    """
    if not name:
        name = DEFAULT_VARIANT
    variant = SUPPORTED_VARIANTS.get(name.strip().lower())
    if variant is None:
        supported = ", ".join(SUPPORTED_VARIANTS)
        raise UnsupportedVariant(f"Unsupported cipher variant '{name}'. Supported: {supported}")
    return variant
