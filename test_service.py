"""
Tests for the one-shot TextCipher facade.
"""

from unittest import mock

import pytest

from cryptotool import (
    AuthenticationFailed,
    InvalidInput,
    KdfParams,
    MalformedEnvelope,
    Operation,
    TextCipher,
    UnsupportedVariant,
)
from cryptotool import service

FAST = KdfParams(scrypt_n=1024)


@pytest.fixture
def cipher():
    return TextCipher(FAST)


def test_encrypt_then_decrypt(cipher):
    envelope = cipher.encrypt_text("correct horse battery staple", "Hello, World!", "aes-256-gcm")
    assert cipher.decrypt_text("correct horse battery staple", envelope, "aes-256-gcm") == "Hello, World!"


@pytest.mark.parametrize("variant", ["aes-128-gcm", "aes-192-gcm", "aes-256-gcm"])
def test_run_dispatches_both_operations(cipher, variant):
    envelope = cipher.run(Operation.ENCRYPT, "hunter2", "multi\nline text", variant)
    assert cipher.run(Operation.DECRYPT, "hunter2", envelope, variant) == "multi\nline text"


def test_variant_mismatch_fails_authentication(cipher):
    envelope = cipher.encrypt_text("hunter2", "secret", "aes-256-gcm")
    with pytest.raises(AuthenticationFailed):
        cipher.decrypt_text("hunter2", envelope, "aes-128-gcm")


def test_wrong_passphrase_fails_authentication(cipher):
    envelope = cipher.encrypt_text("hunter2", "secret")
    with pytest.raises(AuthenticationFailed):
        cipher.decrypt_text("hunter3", envelope)


def test_malformed_envelope(cipher):
    with pytest.raises(MalformedEnvelope):
        cipher.decrypt_text("hunter2", "only:two")


@pytest.mark.parametrize("passphrase,text", [("", "secret"), ("hunter2", "")])
def test_empty_inputs_rejected(cipher, passphrase, text):
    with pytest.raises(InvalidInput):
        cipher.encrypt_text(passphrase, text)
    with pytest.raises(InvalidInput):
        cipher.decrypt_text(passphrase, text)


def test_unsupported_variant_checked_before_key_derivation(cipher):
    with mock.patch.object(cipher.deriver, "derive") as derive:
        with pytest.raises(UnsupportedVariant):
            cipher.encrypt_text("hunter2", "secret", "aes-256-cbc")
        derive.assert_not_called()


def test_key_buffer_is_wiped_after_use(cipher):
    seen = []
    original_wipe = service._wipe

    def spy(buffer):
        original_wipe(buffer)
        seen.append(buffer)

    with mock.patch.object(service, "_wipe", side_effect=spy):
        cipher.encrypt_text("hunter2", "secret")

    assert len(seen) == 1
    assert seen[0] == bytearray(32)


def test_non_utf8_payload_rejected(cipher):
    from cryptotool import EnvelopeCodec, resolve_variant

    variant = resolve_variant("aes-256-gcm")
    key = cipher.deriver.derive("hunter2", variant.key_length)
    envelope = EnvelopeCodec.encrypt(b"\xff\xfe\xfd", key, variant).to_string()

    with pytest.raises(InvalidInput):
        cipher.decrypt_text("hunter2", envelope)


@pytest.mark.parametrize("value,expected", [("encrypt", Operation.ENCRYPT), ("decrypt", Operation.DECRYPT)])
def test_operation_parse(value, expected):
    assert Operation.parse(value) is expected


@pytest.mark.parametrize("value", ["", "Encrypt", "sign", "encode"])
def test_operation_parse_rejects_unknown(value):
    with pytest.raises(InvalidInput):
        Operation.parse(value)
