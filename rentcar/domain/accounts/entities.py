# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

DEFAULT_ROLE = "User"


@dataclass(slots=True, frozen=True)
class Account:

    phone_number: str
    first_name: str
    last_name: str
    email: str
    password_hash: bytes
    password_salt: bytes
    role: str = DEFAULT_ROLE

    def __repr__(self) -> str:
        return (
            f"Account(phone_number={self.phone_number!r}, "
            f"first_name={self.first_name!r}, last_name={self.last_name!r}, "
            f"role={self.role!r})"
        )


@dataclass(slots=True, frozen=True)
class Car:

    id: int
    make: str
    model: str
    year: int | None = None
    price_per_day: Decimal | None = None


@dataclass(slots=True, frozen=True)
class FavoriteLink:

    id: int
    phone_number: str
    car_id: int


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Identity asserted by a verified bearer token."""

    subject: str
    issued_at: datetime
    expires_at: datetime
