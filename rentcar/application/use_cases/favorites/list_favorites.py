# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from rentcar.domain.accounts.entities import Car
from rentcar.domain.accounts.exceptions import UserNotFoundError
from rentcar.domain.accounts.repositories import AccountRepository, FavoriteRepository


class ListFavoritesUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        favorites: FavoriteRepository,
    ) -> None:
        self._accounts = accounts
        self._favorites = favorites

    def execute(self, phone_number: str) -> list[Car]:
        if self._accounts.find_by_phone(phone_number) is None:
            raise UserNotFoundError()
        return self._favorites.list_cars(phone_number)
