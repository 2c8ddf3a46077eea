# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, LargeBinary, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentcar.domain.accounts.entities import DEFAULT_ROLE
from rentcar.infrastructure.db.session import Base


class User(Base):
    __tablename__ = "users"
    phone_number: Mapped[str] = mapped_column(String(32), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(128))
    last_name: Mapped[str] = mapped_column(String(128))
    email: Mapped[str] = mapped_column(String(256))
    role: Mapped[str] = mapped_column(
        String(32), nullable=False, default=DEFAULT_ROLE, server_default=DEFAULT_ROLE
    )
    password_hash: Mapped[bytes] = mapped_column(LargeBinary(64))
    password_salt: Mapped[bytes] = mapped_column(LargeBinary(128))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), index=True
    )
    favorite_cars: Mapped[list["UserFavoriteCar"]] = relationship(
        "UserFavoriteCar", back_populates="user", cascade="all,delete"
    )


class Car(Base):
    __tablename__ = "cars"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    make: Mapped[str] = mapped_column(String(64))
    model: Mapped[str] = mapped_column(String(64))
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    price_per_day: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)


class UserFavoriteCar(Base):
    __tablename__ = "user_favorite_cars"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    phone_number: Mapped[str] = mapped_column(
        ForeignKey("users.phone_number", ondelete="CASCADE"), index=True
    )
    car_id: Mapped[int] = mapped_column(ForeignKey("cars.id", ondelete="CASCADE"), index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )
    user: Mapped["User"] = relationship("User", back_populates="favorite_cars")
    car: Mapped["Car"] = relationship("Car")
