# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from rentcar.domain.accounts.entities import FavoriteLink
from rentcar.domain.accounts.exceptions import CarNotFoundError, UserNotFoundError
from rentcar.domain.accounts.repositories import (
    AccountRepository,
    CarRepository,
    FavoriteRepository,
)
from rentcar.shared.logging import logger


class AddFavoriteUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        cars: CarRepository,
        favorites: FavoriteRepository,
    ) -> None:
        self._accounts = accounts
        self._cars = cars
        self._favorites = favorites

    def execute(self, phone_number: str, car_id: int) -> FavoriteLink:
        if self._accounts.find_by_phone(phone_number) is None:
            raise UserNotFoundError()
        if self._cars.find_by_id(car_id) is None:
            raise CarNotFoundError(car_id)

        existing = self._favorites.find(phone_number, car_id)
        if existing is not None:
            logger.debug(f"favorites.add: already linked phone={phone_number} car_id={car_id}")
            return existing

        link = self._favorites.add(phone_number, car_id)
        logger.info(f"favorites.add: ok phone={phone_number} car_id={car_id}")
        return link
