"""
Tests for passphrase key derivation.
"""

import pytest

from cryptotool import InvalidInput, KdfParams, PassphraseDeriver

FAST_SCRYPT = KdfParams(scrypt_n=1024)
FAST_ARGON2 = KdfParams(
    algorithm="argon2id",
    argon2_time_cost=1,
    argon2_memory_cost=64,
    argon2_parallelism=1,
)


@pytest.mark.parametrize("key_length", [16, 24, 32])
def test_derive_returns_requested_length(key_length):
    key = PassphraseDeriver(FAST_SCRYPT).derive("hunter2", key_length)
    assert isinstance(key, bytes)
    assert len(key) == key_length


def test_derive_is_deterministic():
    deriver = PassphraseDeriver()
    assert deriver.derive("correct horse battery staple", 32) == deriver.derive("correct horse battery staple", 32)


def test_different_passphrases_give_different_keys():
    deriver = PassphraseDeriver(FAST_SCRYPT)
    assert deriver.derive("alpha", 32) != deriver.derive("beta", 32)


def test_shorter_key_is_prefix_of_longer_scrypt_output():
    # scrypt output is a PBKDF2 stream, so lengths agree on the shared prefix
    deriver = PassphraseDeriver(FAST_SCRYPT)
    assert deriver.derive("alpha", 32)[:16] == deriver.derive("alpha", 16)


def test_empty_passphrase_rejected():
    with pytest.raises(InvalidInput):
        PassphraseDeriver(FAST_SCRYPT).derive("", 32)


@pytest.mark.parametrize("key_length", [0, 8, 20, 64])
def test_unsupported_key_length_rejected(key_length):
    with pytest.raises(InvalidInput):
        PassphraseDeriver(FAST_SCRYPT).derive("hunter2", key_length)


def test_custom_salt_changes_key():
    default = PassphraseDeriver(FAST_SCRYPT).derive("hunter2", 32)
    salted = PassphraseDeriver(KdfParams(scrypt_n=1024, salt=b"pepper")).derive("hunter2", 32)
    assert default != salted


def test_argon2id_derivation():
    deriver = PassphraseDeriver(FAST_ARGON2)
    key = deriver.derive("hunter2", 24)
    assert len(key) == 24
    assert key == deriver.derive("hunter2", 24)
    assert key != PassphraseDeriver(FAST_SCRYPT).derive("hunter2", 24)


def test_unknown_algorithm_rejected():
    with pytest.raises(InvalidInput):
        PassphraseDeriver(KdfParams(algorithm="md5"))


def test_argon2id_short_salt_rejected():
    with pytest.raises(InvalidInput):
        PassphraseDeriver(KdfParams(algorithm="argon2id", salt=b"salt"))
