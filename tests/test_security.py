"""Tests for secret field encryption"""

import pytest

from focus_game_deck.config import security
from focus_game_deck.config.security import (
    SecretInput,
    SecretKind,
    decrypt_secret,
    encrypt_secret,
    probe_secret,
    resolve_secret_input,
)


@pytest.mark.parametrize("secret", ["hunter2", "p@ss w0rd with spaces", "パスワード", "x" * 500])
def test_round_trip(secret):
    encrypted = encrypt_secret(secret)

    assert encrypted
    assert encrypted != secret
    assert decrypt_secret(encrypted) == secret


def test_empty_values():
    assert encrypt_secret("") == ""
    assert decrypt_secret("") == ""


def test_encryption_is_not_deterministic():
    assert encrypt_secret("same") != encrypt_secret("same")


def test_plaintext_is_returned_unchanged():
    assert decrypt_secret("legacy-password") == "legacy-password"
    assert decrypt_secret("not base64 !!!") == "not base64 !!!"


def test_probe_reports_kind():
    encrypted = encrypt_secret("token")

    probe = probe_secret(encrypted)
    assert probe.kind is SecretKind.ENCRYPTED
    assert probe.is_encrypted
    assert probe.plaintext == "token"

    legacy = probe_secret("token")
    assert legacy.kind is SecretKind.PLAINTEXT
    assert legacy.plaintext == "token"


def test_value_from_another_machine_does_not_decrypt(monkeypatch):
    encrypted = encrypt_secret("obs-password")

    monkeypatch.setenv("COMPUTERNAME", "OTHER-PC")

    probe = probe_secret(encrypted)
    assert probe.kind is SecretKind.PLAINTEXT
    assert probe.plaintext == encrypted


def test_value_from_another_user_does_not_decrypt(monkeypatch):
    encrypted = encrypt_secret("obs-password")

    monkeypatch.setenv("USERNAME", "someone-else")

    assert decrypt_secret(encrypted) == encrypted


def test_encrypt_fails_closed_on_unencodable_text():
    # Lone surrogates cannot be encoded as UTF-8
    assert encrypt_secret("bad\ud800") == ""


def test_encrypt_fails_closed_when_cipher_errors(monkeypatch):
    def broken_cipher():
        raise ValueError("no key")

    monkeypatch.setattr(security, "_get_cipher", broken_cipher)

    assert encrypt_secret("secret") == ""


def test_resolve_typed_value_encrypts():
    stored = resolve_secret_input("old", SecretInput(value="x"))

    assert stored != "x"
    assert decrypt_secret(stored) == "x"


def test_resolve_blank_with_saved_marker_keeps_current():
    current = encrypt_secret("keep me")

    assert resolve_secret_input(current, SecretInput(value="", saved=True)) == current


def test_resolve_blank_without_saved_marker_clears():
    current = encrypt_secret("drop me")

    assert resolve_secret_input(current, SecretInput(value="", saved=False)) == ""
