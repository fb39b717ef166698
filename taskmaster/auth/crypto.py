"""Symmetric encryption for stored OAuth tokens.

AES-256-GCM with a fresh 12-byte nonce per encryption. The nonce is prepended
to the ciphertext and the whole blob is base64 encoded for string storage.
"""

import base64
import binascii
import hashlib
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from pydantic import ValidationError as PydanticValidationError

from taskmaster.auth.models import OAuthToken
from taskmaster.exceptions import TokenDecryptionError

NONCE_SIZE = 12


class TokenCipher:
    """Encrypts and decrypts ``OAuthToken`` records with a configured key."""

    def __init__(self, key: str):
        if not key:
            raise ValueError("Encryption key must not be empty")
        # Any passphrase length maps onto a 256-bit key
        self._aead = AESGCM(hashlib.sha256(key.encode("utf-8")).digest())

    def encrypt(self, token: OAuthToken) -> str:
        nonce = os.urandom(NONCE_SIZE)
        ciphertext = self._aead.encrypt(nonce, token.model_dump_json().encode("utf-8"), None)
        return base64.b64encode(nonce + ciphertext).decode("ascii")

    def decrypt(self, blob: str) -> OAuthToken:
        """Decrypt a stored blob.

        Raises:
            TokenDecryptionError: wrong key, corrupted or truncated blob, or
                a payload that is not a token record
        """
        try:
            raw = base64.b64decode(blob.encode("ascii"), validate=True)
            if len(raw) <= NONCE_SIZE:
                raise TokenDecryptionError("Encrypted token is truncated")
            plaintext = self._aead.decrypt(raw[:NONCE_SIZE], raw[NONCE_SIZE:], None)
            return OAuthToken.model_validate_json(plaintext)
        except TokenDecryptionError:
            raise
        except (
            InvalidTag,
            binascii.Error,
            UnicodeError,
            AttributeError,
            TypeError,
            PydanticValidationError,
        ) as exc:
            raise TokenDecryptionError(
                f"Failed to decrypt token: {type(exc).__name__}"
            ) from exc
