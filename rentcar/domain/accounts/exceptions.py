# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from rentcar.shared.errors.base import DomainError


class AccountAlreadyExistsError(DomainError):
    code = "account_already_exists"
    status = HTTPStatus.CONFLICT


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND


class WrongPasswordError(DomainError):
    code = "wrong_password"
    status = HTTPStatus.UNAUTHORIZED


class CarNotFoundError(DomainError):
    code = "car_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, car_id: int) -> None:
        super().__init__(context={"car_id": car_id})


class FavoriteNotFoundError(DomainError):
    code = "favorite_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, car_id: int) -> None:
        super().__init__(context={"car_id": car_id})


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
