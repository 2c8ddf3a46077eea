from __future__ import annotations

import pytest

from rentcar.application.use_cases.favorites.add_favorite import AddFavoriteUseCase
from rentcar.application.use_cases.favorites.list_favorites import ListFavoritesUseCase
from rentcar.application.use_cases.favorites.remove_favorite import RemoveFavoriteUseCase
from rentcar.domain.accounts.entities import Account
from rentcar.domain.accounts.exceptions import (
    CarNotFoundError,
    FavoriteNotFoundError,
    UserNotFoundError,
)

PHONE = "+15551234567"


@pytest.fixture()
def seeded_accounts(accounts):
    accounts.add(
        Account(
            phone_number=PHONE,
            first_name="Ann",
            last_name="Lee",
            email="a@x.com",
            password_hash=b"\x00" * 64,
            password_salt=b"\x01" * 128,
        )
    )
    return accounts


@pytest.fixture()
def add(seeded_accounts, cars, favorites) -> AddFavoriteUseCase:
    return AddFavoriteUseCase(accounts=seeded_accounts, cars=cars, favorites=favorites)


@pytest.fixture()
def remove(seeded_accounts, favorites) -> RemoveFavoriteUseCase:
    return RemoveFavoriteUseCase(accounts=seeded_accounts, favorites=favorites)


@pytest.fixture()
def listing(seeded_accounts, favorites) -> ListFavoritesUseCase:
    return ListFavoritesUseCase(accounts=seeded_accounts, favorites=favorites)


def test_favorites_scenario(
    add: AddFavoriteUseCase, remove: RemoveFavoriteUseCase, listing: ListFavoritesUseCase
) -> None:
    add.execute(PHONE, 42)
    assert {car.id for car in listing.execute(PHONE)} == {42}

    remove.execute(PHONE, 42)
    assert listing.execute(PHONE) == []

    with pytest.raises(FavoriteNotFoundError) as exc_info:
        remove.execute(PHONE, 42)
    assert exc_info.value.context == {"car_id": 42}


def test_add_favorite_is_idempotent(
    add: AddFavoriteUseCase, listing: ListFavoritesUseCase, favorites
) -> None:
    first = add.execute(PHONE, 42)
    second = add.execute(PHONE, 42)

    assert first == second
    assert len(favorites._links) == 1
    assert [car.id for car in listing.execute(PHONE)] == [42]


def test_add_favorite_requires_account_and_car(add: AddFavoriteUseCase) -> None:
    with pytest.raises(UserNotFoundError):
        add.execute("+19999999999", 42)

    with pytest.raises(CarNotFoundError) as exc_info:
        add.execute(PHONE, 999)
    assert exc_info.value.code == "car_not_found"


def test_remove_and_list_require_account(
    remove: RemoveFavoriteUseCase, listing: ListFavoritesUseCase
) -> None:
    with pytest.raises(UserNotFoundError):
        remove.execute("+19999999999", 42)

    with pytest.raises(UserNotFoundError):
        listing.execute("+19999999999")


def test_list_favorites_keeps_insertion_order(
    add: AddFavoriteUseCase, listing: ListFavoritesUseCase
) -> None:
    add.execute(PHONE, 7)
    add.execute(PHONE, 42)

    assert [car.make for car in listing.execute(PHONE)] == ["Kia", "Toyota"]
