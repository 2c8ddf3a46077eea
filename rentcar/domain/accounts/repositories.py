# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Account, Car, FavoriteLink, SessionClaims


class AccountRepository(Protocol):
    def find_by_phone(self, phone_number: str) -> Account | None: ...
    def add(self, account: Account) -> Account: ...


class CarRepository(Protocol):
    def find_by_id(self, car_id: int) -> Car | None: ...
    def add(self, car: Car) -> Car: ...


class FavoriteRepository(Protocol):
    def find(self, phone_number: str, car_id: int) -> FavoriteLink | None: ...
    def add(self, phone_number: str, car_id: int) -> FavoriteLink: ...
    def remove(self, link_id: int) -> None: ...
    def list_cars(self, phone_number: str) -> list[Car]: ...


class PasswordHasher(Protocol):
    def derive(self, password: str) -> tuple[bytes, bytes]: ...
    def verify(self, password: str, password_hash: bytes, password_salt: bytes) -> bool: ...


class SessionTokenIssuer(Protocol):
    def issue(self, subject: str, *, now: datetime | None = None) -> str: ...
    def verify(self, token: str, *, now: datetime | None = None) -> SessionClaims: ...


class RegistrationNotifier(Protocol):
    def send_registration_notice(self, email: str, first_name: str, last_name: str) -> None: ...


class NotificationDispatcher(Protocol):
    def dispatch_registration_notice(
        self, email: str, first_name: str, last_name: str
    ) -> object:
        """Start delivery without waiting; the return value is an optional handle."""
        ...
