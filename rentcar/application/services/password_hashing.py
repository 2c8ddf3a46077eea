"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import hmac
import secrets

from rentcar.domain.accounts.repositories import PasswordHasher
from rentcar.domain.exceptions import CorruptCredentialError

# The salt doubles as the HMAC key; 128 bytes is the SHA-512 block size.
SALT_BYTES = 128
MIN_SALT_BYTES = 16
HASH_BYTES = hashlib.sha512().digest_size


class HmacPasswordHasher(PasswordHasher):
    """HMAC-SHA-512 keyed by a random per-account salt."""

    def __init__(self, *, salt_bytes: int = SALT_BYTES) -> None:
        if salt_bytes < MIN_SALT_BYTES:
            raise ValueError(f"salt_bytes must be >= {MIN_SALT_BYTES}")
        self._salt_bytes = salt_bytes

    @staticmethod
    def _digest(password: str, salt: bytes) -> bytes:
        return hmac.new(salt, password.encode("utf-8"), hashlib.sha512).digest()

    def derive(self, password: str) -> tuple[bytes, bytes]:
        salt = secrets.token_bytes(self._salt_bytes)
        return self._digest(password, salt), salt

    def verify(self, password: str, password_hash: bytes, password_salt: bytes) -> bool:
        if len(password_hash) != HASH_BYTES:
            raise CorruptCredentialError(
                "password_hash", expected=str(HASH_BYTES), actual=len(password_hash)
            )
        if len(password_salt) < MIN_SALT_BYTES:
            raise CorruptCredentialError(
                "password_salt", expected=f">={MIN_SALT_BYTES}", actual=len(password_salt)
            )
        return hmac.compare_digest(self._digest(password, password_salt), password_hash)
