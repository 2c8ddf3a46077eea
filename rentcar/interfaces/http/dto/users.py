from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rentcar.domain.accounts.entities import Account, Car

PHONE_PATTERN = r"^\+?[0-9]{5,15}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(alias="phoneNumber", pattern=PHONE_PATTERN)
    first_name: str = Field(alias="firstName", min_length=1, max_length=128)
    last_name: str = Field(alias="lastName", min_length=1, max_length=128)
    email: str = Field(max_length=256, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("first_name", "last_name", "email")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(alias="phoneNumber", min_length=1, max_length=32)
    password: str = Field(min_length=1, max_length=128)


class AccountDTO(BaseModel):
    """Public view of an account; credential material is never serialized."""

    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(alias="phoneNumber")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    role: str

    @classmethod
    def from_domain(cls, account: Account) -> "AccountDTO":
        return cls(
            phone_number=account.phone_number,
            first_name=account.first_name,
            last_name=account.last_name,
            email=account.email,
            role=account.role,
        )


class CarDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    make: str
    model: str
    year: int | None = None
    price_per_day: Decimal | None = Field(None, alias="pricePerDay")

    @classmethod
    def from_domain(cls, car: Car) -> "CarDTO":
        return cls(
            id=car.id,
            make=car.make,
            model=car.model,
            year=car.year,
            price_per_day=car.price_per_day,
        )


class TokenDTO(BaseModel):
    token: str


class OkDTO(BaseModel):
    ok: bool = True
