# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.accounts.get_account import GetAccountUseCase
from .use_cases.accounts.login_account import LoginAccountUseCase
from .use_cases.accounts.register_account import RegisterAccountUseCase
from .use_cases.favorites.add_favorite import AddFavoriteUseCase
from .use_cases.favorites.list_favorites import ListFavoritesUseCase
from .use_cases.favorites.remove_favorite import RemoveFavoriteUseCase

__all__ = [
    "AddFavoriteUseCase",
    "GetAccountUseCase",
    "ListFavoritesUseCase",
    "LoginAccountUseCase",
    "RegisterAccountUseCase",
    "RemoveFavoriteUseCase",
]
