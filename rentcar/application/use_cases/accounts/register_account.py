# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from rentcar.domain.accounts.entities import DEFAULT_ROLE, Account
from rentcar.domain.accounts.exceptions import AccountAlreadyExistsError
from rentcar.domain.accounts.repositories import (
    AccountRepository,
    NotificationDispatcher,
    PasswordHasher,
)
from rentcar.shared.logging import logger


class RegisterAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        notifications: NotificationDispatcher,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._notifications = notifications

    def execute(
        self,
        phone_number: str,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> Account:
        if self._accounts.find_by_phone(phone_number):
            raise AccountAlreadyExistsError()

        password_hash, password_salt = self._password_hasher.derive(password)
        account = Account(
            phone_number=phone_number,
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=DEFAULT_ROLE,
            password_hash=password_hash,
            password_salt=password_salt,
        )
        persisted = self._accounts.add(account)
        logger.info(f"accounts.register: created phone={persisted.phone_number}")

        # The account is committed at this point; the notice must not undo it.
        try:
            self._notifications.dispatch_registration_notice(
                persisted.email, persisted.first_name, persisted.last_name
            )
        except Exception:
            logger.exception("accounts.register: could not dispatch registration notice")

        return persisted
