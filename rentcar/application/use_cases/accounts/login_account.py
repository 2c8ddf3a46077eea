# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from rentcar.domain.accounts.exceptions import UserNotFoundError, WrongPasswordError
from rentcar.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    SessionTokenIssuer,
)
from rentcar.shared.errors.base import DomainError, InternalError
from rentcar.shared.logging import logger


class LoginAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        tokens: SessionTokenIssuer,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, phone_number: str, password: str) -> str:
        try:
            account = self._accounts.find_by_phone(phone_number)
            if account is None:
                raise UserNotFoundError()

            if not self._password_hasher.verify(
                password, account.password_hash, account.password_salt
            ):
                logger.info(f"accounts.login: wrong password phone={phone_number}")
                raise WrongPasswordError()

            token = self._tokens.issue(account.phone_number)
        except DomainError:
            raise
        except Exception as exc:
            logger.exception(f"accounts.login: unexpected failure phone={phone_number}")
            raise InternalError() from exc

        logger.info(f"accounts.login: ok phone={phone_number}")
        return token
