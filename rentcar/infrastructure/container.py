# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from rentcar.application.services.password_hashing import HmacPasswordHasher
from rentcar.application.services.session_tokens import JwtSessionTokenIssuer
from rentcar.application.use_cases.accounts.get_account import GetAccountUseCase
from rentcar.application.use_cases.accounts.login_account import LoginAccountUseCase
from rentcar.application.use_cases.accounts.register_account import RegisterAccountUseCase
from rentcar.application.use_cases.favorites.add_favorite import AddFavoriteUseCase
from rentcar.application.use_cases.favorites.list_favorites import ListFavoritesUseCase
from rentcar.application.use_cases.favorites.remove_favorite import RemoveFavoriteUseCase
from rentcar.infrastructure.db import Database
from rentcar.infrastructure.mail import SmtpRegistrationNotifier
from rentcar.infrastructure.notifications import ThreadedNotificationDispatcher
from rentcar.infrastructure.repositories.accounts import (
    SqlAlchemyAccountRepository,
    SqlAlchemyCarRepository,
    SqlAlchemyFavoriteRepository,
)
from rentcar.interfaces.http.controllers.misc_controller import MiscController
from rentcar.interfaces.http.controllers.users_controller import UsersController
from rentcar.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config if self._config is not None else load_config()

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> HmacPasswordHasher:
        return HmacPasswordHasher()

    @cached_property
    def session_token_issuer(self) -> JwtSessionTokenIssuer:
        return JwtSessionTokenIssuer(self.config.token)

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.database)

    @cached_property
    def car_repository(self) -> SqlAlchemyCarRepository:
        return SqlAlchemyCarRepository(self.database)

    @cached_property
    def favorite_repository(self) -> SqlAlchemyFavoriteRepository:
        return SqlAlchemyFavoriteRepository(self.database)

    @cached_property
    def notification_dispatcher(self) -> ThreadedNotificationDispatcher:
        return ThreadedNotificationDispatcher(SmtpRegistrationNotifier(self.config.mail))

    @cached_property
    def register_account_use_case(self) -> RegisterAccountUseCase:
        return RegisterAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            notifications=self.notification_dispatcher,
        )

    @cached_property
    def login_account_use_case(self) -> LoginAccountUseCase:
        return LoginAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            tokens=self.session_token_issuer,
        )

    @cached_property
    def get_account_use_case(self) -> GetAccountUseCase:
        return GetAccountUseCase(accounts=self.account_repository)

    @cached_property
    def list_favorites_use_case(self) -> ListFavoritesUseCase:
        return ListFavoritesUseCase(
            accounts=self.account_repository, favorites=self.favorite_repository
        )

    @cached_property
    def add_favorite_use_case(self) -> AddFavoriteUseCase:
        return AddFavoriteUseCase(
            accounts=self.account_repository,
            cars=self.car_repository,
            favorites=self.favorite_repository,
        )

    @cached_property
    def remove_favorite_use_case(self) -> RemoveFavoriteUseCase:
        return RemoveFavoriteUseCase(
            accounts=self.account_repository, favorites=self.favorite_repository
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            register_use_case=self.register_account_use_case,
            login_use_case=self.login_account_use_case,
            get_account_use_case=self.get_account_use_case,
            list_favorites_use_case=self.list_favorites_use_case,
            add_favorite_use_case=self.add_favorite_use_case,
            remove_favorite_use_case=self.remove_favorite_use_case,
            tokens=self.session_token_issuer,
        )


container = Container()
