# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts.entities import DEFAULT_ROLE, Account, Car, FavoriteLink, SessionClaims
from .exceptions import CorruptCredentialError, InvariantViolationError

__all__ = [
    "Account",
    "Car",
    "CorruptCredentialError",
    "DEFAULT_ROLE",
    "FavoriteLink",
    "InvariantViolationError",
    "SessionClaims",
]
