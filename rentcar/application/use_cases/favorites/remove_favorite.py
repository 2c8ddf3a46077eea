# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from rentcar.domain.accounts.exceptions import FavoriteNotFoundError, UserNotFoundError
from rentcar.domain.accounts.repositories import AccountRepository, FavoriteRepository
from rentcar.shared.logging import logger


class RemoveFavoriteUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        favorites: FavoriteRepository,
    ) -> None:
        self._accounts = accounts
        self._favorites = favorites

    def execute(self, phone_number: str, car_id: int) -> None:
        if self._accounts.find_by_phone(phone_number) is None:
            raise UserNotFoundError()

        link = self._favorites.find(phone_number, car_id)
        if link is None:
            raise FavoriteNotFoundError(car_id)

        self._favorites.remove(link.id)
        logger.info(f"favorites.remove: ok phone={phone_number} car_id={car_id}")
