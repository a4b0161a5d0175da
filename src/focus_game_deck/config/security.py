"""Encryption of secret configuration fields (OBS password, VTube Studio token).

Uses Fernet symmetric encryption with a key derived from the current user
name, the machine name and a static salt. A value encrypted here is only
recoverable by the same user on the same machine; copied to another account
or computer it no longer decrypts and is treated as an opaque plaintext
string.

Encrypted values carry no marker. Whether a stored string is encrypted is
only known after trying to decrypt it, which is what ``probe_secret``
reports.
"""

import base64
import hashlib
import os
import platform
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from cryptography.fernet import Fernet, InvalidToken

from ..logging_config import get_logger

logger = get_logger("security")

# Static salt - not secret, just adds entropy
_SALT = b"FocusGameDeck_secret_salt_v1"


class SecretKind(Enum):
    """What a stored secret string turned out to be"""
    ENCRYPTED = "encrypted"
    PLAINTEXT = "plaintext"


@dataclass(frozen=True)
class SecretProbe:
    """Result of trying to decrypt a stored secret"""
    kind: SecretKind
    plaintext: str

    @property
    def is_encrypted(self) -> bool:
        return self.kind is SecretKind.ENCRYPTED


@dataclass(frozen=True)
class SecretInput:
    """Value of a secret input field plus the UI's "already saved" marker.

    An empty ``value`` means the user typed nothing. ``saved`` is set when
    the field was displayed blank over an existing stored secret.
    """
    value: str = ""
    saved: bool = False


def _machine_identity() -> tuple[str, str]:
    """Current user and machine name used as key material."""
    username = os.environ.get("USERNAME") or os.environ.get("USER") or "default_user"
    computername = os.environ.get("COMPUTERNAME") or platform.node() or "default_machine"
    return username, computername


@lru_cache(maxsize=8)
def _derive_key(username: str, computername: str) -> bytes:
    """Derive a Fernet key from the user and machine identity.

    Returns:
        32-byte key, urlsafe base64 encoded
    """
    key_material = f"{username}:{computername}".encode('utf-8')

    key = hashlib.pbkdf2_hmac(
        'sha256',
        key_material,
        _SALT,
        iterations=100000,
        dklen=32
    )

    return base64.urlsafe_b64encode(key)


def _get_cipher() -> Fernet:
    """Get the Fernet cipher bound to the current user and machine."""
    return Fernet(_derive_key(*_machine_identity()))


def encrypt_secret(plain_text: str) -> str:
    """Encrypt a secret for storage.

    Fails closed: any encryption error yields an empty string so plaintext
    is never persisted by accident.

    Args:
        plain_text: The secret to encrypt

    Returns:
        Fernet token as text, or "" for empty input or on failure
    """
    if not plain_text:
        return ""

    try:
        encrypted = _get_cipher().encrypt(plain_text.encode('utf-8'))
        return encrypted.decode('ascii')
    except (TypeError, ValueError, UnicodeError) as e:
        logger.error(f"Failed to encrypt secret, storing empty value: {e}")
        return ""


def probe_secret(stored: str) -> SecretProbe:
    """Try to decrypt a stored secret.

    Args:
        stored: Value read from the configuration document

    Returns:
        ENCRYPTED with the recovered plaintext, or PLAINTEXT with the
        input unchanged when it does not decrypt
    """
    if not stored:
        return SecretProbe(SecretKind.PLAINTEXT, "")

    try:
        decrypted = _get_cipher().decrypt(stored.encode('utf-8'))
        return SecretProbe(SecretKind.ENCRYPTED, decrypted.decode('utf-8'))
    except (InvalidToken, TypeError, ValueError, UnicodeError) as e:
        logger.debug(f"Stored secret is not decryptable here, treating as plain text: {type(e).__name__}")
        return SecretProbe(SecretKind.PLAINTEXT, stored)


def decrypt_secret(stored: str) -> str:
    """Decrypt a stored secret, returning legacy plain text unchanged.

    Args:
        stored: Value read from the configuration document

    Returns:
        The plain text secret; never raises
    """
    return probe_secret(stored).plaintext


def resolve_secret_input(current: str, secret_input: SecretInput) -> str:
    """Compute the value to store for a secret field after a form save.

    - typed value: encrypt it and overwrite
    - blank, saved marker set: keep the current stored value
    - blank, no saved marker: store an empty secret

    Args:
        current: The stored (encrypted) value before the save
        secret_input: What the form reported

    Returns:
        The stored value after the save
    """
    if secret_input.value:
        return encrypt_secret(secret_input.value)
    if secret_input.saved:
        return current
    return ""
