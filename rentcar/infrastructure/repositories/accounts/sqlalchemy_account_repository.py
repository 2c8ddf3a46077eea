# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from rentcar.domain.accounts.entities import Account as DomainAccount
from rentcar.domain.accounts.entities import Car as DomainCar
from rentcar.domain.accounts.entities import FavoriteLink
from rentcar.domain.accounts.exceptions import AccountAlreadyExistsError
from rentcar.domain.accounts.repositories import (
    AccountRepository,
    CarRepository,
    FavoriteRepository,
)
from rentcar.infrastructure.db.models import Car, User, UserFavoriteCar
from rentcar.infrastructure.db.session import Database


def _to_account(row: User) -> DomainAccount:
    return DomainAccount(
        phone_number=row.phone_number,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        role=row.role,
        password_hash=bytes(row.password_hash),
        password_salt=bytes(row.password_salt),
    )


def _to_car(row: Car) -> DomainCar:
    return DomainCar(
        id=row.id,
        make=row.make,
        model=row.model,
        year=row.year,
        price_per_day=row.price_per_day,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_phone(self, phone_number: str) -> DomainAccount | None:
        with self._db.session_scope() as session:
            row = session.get(User, phone_number)
            if not row:
                return None
            return _to_account(row)

    def add(self, account: DomainAccount) -> DomainAccount:
        with self._db.session_scope() as session:
            row = User(
                phone_number=account.phone_number,
                first_name=account.first_name,
                last_name=account.last_name,
                email=account.email,
                role=account.role,
                password_hash=account.password_hash,
                password_salt=account.password_salt,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                # A concurrent registration committed the same phone first.
                raise AccountAlreadyExistsError() from exc
            return _to_account(row)


class SqlAlchemyCarRepository(CarRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_id(self, car_id: int) -> DomainCar | None:
        with self._db.session_scope() as session:
            row = session.get(Car, car_id)
            if not row:
                return None
            return _to_car(row)

    def add(self, car: DomainCar) -> DomainCar:
        with self._db.session_scope() as session:
            row = Car(
                id=car.id or None,
                make=car.make,
                model=car.model,
                year=car.year,
                price_per_day=car.price_per_day,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_car(row)


class SqlAlchemyFavoriteRepository(FavoriteRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find(self, phone_number: str, car_id: int) -> FavoriteLink | None:
        with self._db.session_scope() as session:
            row = (
                session.query(UserFavoriteCar)
                .filter(
                    UserFavoriteCar.phone_number == phone_number,
                    UserFavoriteCar.car_id == car_id,
                )
                .order_by(UserFavoriteCar.id.asc())
                .first()
            )
            if not row:
                return None
            return FavoriteLink(id=row.id, phone_number=row.phone_number, car_id=row.car_id)

    def add(self, phone_number: str, car_id: int) -> FavoriteLink:
        with self._db.session_scope() as session:
            row = UserFavoriteCar(phone_number=phone_number, car_id=car_id)
            session.add(row)
            session.flush()
            return FavoriteLink(id=row.id, phone_number=row.phone_number, car_id=row.car_id)

    def remove(self, link_id: int) -> None:
        with self._db.session_scope() as session:
            session.query(UserFavoriteCar).filter(UserFavoriteCar.id == link_id).delete()

    def list_cars(self, phone_number: str) -> list[DomainCar]:
        with self._db.session_scope() as session:
            rows = (
                session.query(UserFavoriteCar)
                .options(joinedload(UserFavoriteCar.car))
                .filter(UserFavoriteCar.phone_number == phone_number)
                .order_by(UserFavoriteCar.id.asc())
                .all()
            )
            return [_to_car(row.car) for row in rows]
