# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Environment-driven configuration.

Every section reads its own variables (and ``.env``) so it can be built on its
own in tests, e.g. ``TokenConfig(TOKEN_SECRET=...)``. ``AppConfig`` nests all
sections and is cached by :func:`load_config`.
"""

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BeforeValidator, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# HS512 needs a key at least as long as its 512-bit digest.
MIN_TOKEN_SECRET_BYTES = 64
SUPPORTED_TOKEN_ALGORITHMS = ("HS384", "HS512")

_SECTION = SettingsConfigDict(
    env_file=".env", env_file_encoding="utf-8", validate_by_name=True, extra="ignore"
)


def _to_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _split_csv(value: object) -> object:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


Flag = Annotated[bool, BeforeValidator(_to_bool)]
CsvList = Annotated[list[str], NoDecode, BeforeValidator(_split_csv)]


class DatabaseConfig(BaseSettings):
    model_config = _SECTION

    url: str = Field("sqlite:///rentcar.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")


class TokenConfig(BaseSettings):
    model_config = _SECTION

    secret: str | None = Field(None, alias="TOKEN_SECRET")
    algorithm: str = Field("HS512", alias="TOKEN_ALGORITHM")
    lifetime_hours: int = Field(24, ge=1, alias="TOKEN_LIFETIME_HOURS")
    subject_claim: str = Field("mobilephone", min_length=1, alias="TOKEN_SUBJECT_CLAIM")

    @field_validator("secret")
    @classmethod
    def _secret_long_enough(cls, value: str | None) -> str | None:
        if value is not None and len(value.encode("utf-8")) < MIN_TOKEN_SECRET_BYTES:
            raise ValueError(
                f"TOKEN_SECRET must be at least {MIN_TOKEN_SECRET_BYTES} bytes long"
            )
        return value

    @field_validator("algorithm")
    @classmethod
    def _algorithm_supported(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in SUPPORTED_TOKEN_ALGORITHMS:
            allowed = ", ".join(SUPPORTED_TOKEN_ALGORITHMS)
            raise ValueError(f"TOKEN_ALGORITHM must be one of {allowed}")
        return normalized


class MailConfig(BaseSettings):
    model_config = _SECTION

    enabled: Flag = Field(False, alias="MAIL_ENABLED")
    host: str = Field("localhost", alias="MAIL_HOST")
    port: int = Field(25, ge=1, le=65535, alias="MAIL_PORT")
    username: str | None = Field(None, alias="MAIL_USERNAME")
    password: str | None = Field(None, alias="MAIL_PASSWORD")
    use_tls: Flag = Field(False, alias="MAIL_USE_TLS")
    sender: str = Field("no-reply@rentcar.local", alias="MAIL_SENDER")
    timeout: float = Field(10.0, ge=0.1, alias="MAIL_TIMEOUT")


class SecurityConfig(BaseSettings):
    model_config = _SECTION

    allowed_origins: CsvList = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: Flag = Field(False, alias="ENABLE_HSTS")


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", validate_assignment=True, extra="ignore"
    )

    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: Flag = Field(False, alias="DEBUG_LOGGING")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    # Sections are built lazily so each one reads the environment itself.
    database: DatabaseConfig = Field(default_factory=lambda: DatabaseConfig())
    token: TokenConfig = Field(default_factory=lambda: TokenConfig())
    mail: MailConfig = Field(default_factory=lambda: MailConfig())
    security: SecurityConfig = Field(default_factory=lambda: SecurityConfig())

    def is_production(self) -> bool:
        return self.app_env.strip().lower() in ("production", "prod")

    def production_warnings(self) -> list[str]:
        checks = (
            (not self.mail.enabled, "registration e-mails are disabled"),
            (self.mail.enabled and not self.mail.use_tls, "SMTP is not using STARTTLS"),
            ("*" in self.security.allowed_origins, "CORS allows any origin (*)"),
            (not self.security.enable_hsts, "HSTS header is disabled"),
            (self.database.url.startswith("sqlite"), "SQLite database in production"),
        )
        return [message for failed, message in checks if failed]

    @model_validator(mode="after")
    def _report_production_risks(self) -> "AppConfig":
        if self.is_production():
            for warning in self.production_warnings():
                print(f"⚠️  rentcar config: {warning}", file=sys.stderr)
        return self


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "MailConfig",
    "MIN_TOKEN_SECRET_BYTES",
    "SUPPORTED_TOKEN_ALGORITHMS",
    "SecurityConfig",
    "TokenConfig",
    "load_config",
]
