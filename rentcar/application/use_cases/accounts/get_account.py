# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from rentcar.domain.accounts.entities import Account
from rentcar.domain.accounts.exceptions import UserNotFoundError
from rentcar.domain.accounts.repositories import AccountRepository


class GetAccountUseCase:
    def __init__(self, *, accounts: AccountRepository) -> None:
        self._accounts = accounts

    def execute(self, phone_number: str) -> Account:
        account = self._accounts.find_by_phone(phone_number)
        if account is None:
            raise UserNotFoundError()
        return account
