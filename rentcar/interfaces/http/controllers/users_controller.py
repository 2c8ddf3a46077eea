# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from rentcar.application.use_cases.accounts.get_account import GetAccountUseCase
from rentcar.application.use_cases.accounts.login_account import LoginAccountUseCase
from rentcar.application.use_cases.accounts.register_account import RegisterAccountUseCase
from rentcar.application.use_cases.favorites.add_favorite import AddFavoriteUseCase
from rentcar.application.use_cases.favorites.list_favorites import ListFavoritesUseCase
from rentcar.application.use_cases.favorites.remove_favorite import RemoveFavoriteUseCase
from rentcar.auth import auth_required
from rentcar.domain.accounts.repositories import SessionTokenIssuer
from rentcar.interfaces.http.dto.users import (
    AccountDTO,
    CarDTO,
    LoginRequestDTO,
    OkDTO,
    RegisterRequestDTO,
    TokenDTO,
)
from rentcar.shared.errors.validation import raise_validation_error
from rentcar.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterAccountUseCase,
        login_use_case: LoginAccountUseCase,
        get_account_use_case: GetAccountUseCase,
        list_favorites_use_case: ListFavoritesUseCase,
        add_favorite_use_case: AddFavoriteUseCase,
        remove_favorite_use_case: RemoveFavoriteUseCase,
        tokens: SessionTokenIssuer,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._get_account_use_case = get_account_use_case
        self._list_favorites_use_case = list_favorites_use_case
        self._add_favorite_use_case = add_favorite_use_case
        self._remove_favorite_use_case = remove_favorite_use_case
        self._tokens = tokens

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        account = self._register_use_case.execute(
            dto.phone_number, dto.first_name, dto.last_name, dto.email, dto.password
        )
        logger.info(f"users.register: ok phone={account.phone_number}")
        return jsonify(AccountDTO.from_domain(account).model_dump(by_alias=True)), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        token = self._login_use_case.execute(dto.phone_number, dto.password)
        return jsonify(TokenDTO(token=token).model_dump()), 200

    def get_user(self, phone_number: str) -> tuple[Response, int]:
        account = self._get_account_use_case.execute(phone_number)
        return jsonify(AccountDTO.from_domain(account).model_dump(by_alias=True)), 200

    def favorite_cars(self, phone_number: str) -> tuple[Response, int]:
        cars = self._list_favorites_use_case.execute(phone_number)
        payload = [CarDTO.from_domain(car).model_dump(by_alias=True, mode="json") for car in cars]
        return jsonify(payload), 200

    def add_favorite(self, phone_number: str, car_id: int) -> tuple[Response, int]:
        self._add_favorite_use_case.execute(phone_number, car_id)
        return jsonify(OkDTO().model_dump()), 200

    def remove_favorite(self, phone_number: str, car_id: int) -> tuple[str, int]:
        self._remove_favorite_use_case.execute(phone_number, car_id)
        return "", 204

    def as_blueprint(self) -> Blueprint:
        authed = auth_required(self._tokens)
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/<phone_number>",
            endpoint="get_user",
            view_func=authed(self.get_user),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/<phone_number>/favorite-cars",
            endpoint="favorite_cars",
            view_func=authed(self.favorite_cars),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/<phone_number>/favorites/<int:car_id>",
            endpoint="add_favorite",
            view_func=authed(self.add_favorite),
            methods=["POST"],
        )
        bp.add_url_rule(
            "/<phone_number>/favorite-cars/remove-from-favourites/<int:car_id>",
            endpoint="remove_favorite",
            view_func=authed(self.remove_favorite),
            methods=["DELETE"],
        )
        return bp
