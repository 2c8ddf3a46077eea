from __future__ import annotations

import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="rentcar-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP / 'rentcar.db'}")
os.environ.setdefault("LOG_FILE", str(_TMP / "rentcar.log"))
os.environ.setdefault("TOKEN_SECRET", "test-signing-secret-" + "x" * 64)
os.environ.setdefault("MAIL_ENABLED", "false")

import pytest  # noqa: E402

from rentcar.domain.accounts.entities import Account, Car, FavoriteLink  # noqa: E402
from rentcar.domain.accounts.repositories import (  # noqa: E402
    AccountRepository,
    CarRepository,
    FavoriteRepository,
    NotificationDispatcher,
)
from rentcar.shared.config import TokenConfig  # noqa: E402

TEST_SECRET = "unit-test-secret-" + "s" * 64


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}

    def find_by_phone(self, phone_number: str) -> Account | None:
        return self._accounts.get(phone_number)

    def add(self, account: Account) -> Account:
        self._accounts[account.phone_number] = account
        return account


class InMemoryCarRepository(CarRepository):
    def __init__(self, cars: list[Car] | None = None) -> None:
        self._cars = {car.id: car for car in cars or []}

    def find_by_id(self, car_id: int) -> Car | None:
        return self._cars.get(car_id)

    def add(self, car: Car) -> Car:
        self._cars[car.id] = car
        return car


class InMemoryFavoriteRepository(FavoriteRepository):
    def __init__(self, cars: InMemoryCarRepository) -> None:
        self._cars = cars
        self._links: list[FavoriteLink] = []
        self._seq = 1

    def find(self, phone_number: str, car_id: int) -> FavoriteLink | None:
        for link in self._links:
            if link.phone_number == phone_number and link.car_id == car_id:
                return link
        return None

    def add(self, phone_number: str, car_id: int) -> FavoriteLink:
        link = FavoriteLink(id=self._seq, phone_number=phone_number, car_id=car_id)
        self._seq += 1
        self._links.append(link)
        return link

    def remove(self, link_id: int) -> None:
        self._links = [link for link in self._links if link.id != link_id]

    def list_cars(self, phone_number: str) -> list[Car]:
        return [
            car
            for link in self._links
            if link.phone_number == phone_number
            and (car := self._cars.find_by_id(link.car_id)) is not None
        ]


class RecordingDispatcher(NotificationDispatcher):
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []

    def dispatch_registration_notice(self, email: str, first_name: str, last_name: str) -> None:
        self.sent.append((email, first_name, last_name))


@pytest.fixture()
def token_config() -> TokenConfig:
    return TokenConfig(TOKEN_SECRET=TEST_SECRET)


@pytest.fixture()
def accounts() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture()
def cars() -> InMemoryCarRepository:
    return InMemoryCarRepository(
        [
            Car(id=42, make="Toyota", model="Corolla", year=2021),
            Car(id=7, make="Kia", model="Rio", year=2019),
        ]
    )


@pytest.fixture()
def favorites(cars: InMemoryCarRepository) -> InMemoryFavoriteRepository:
    return InMemoryFavoriteRepository(cars)


@pytest.fixture()
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()
