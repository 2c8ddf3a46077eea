# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error taxonomy shared by every layer.

Each error carries a stable machine-readable ``code``, the HTTP status it maps
to and an optional ``context`` that is safe to show to clients.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    @property
    def is_server_error(self) -> bool:
        return self.status >= HTTPStatus.INTERNAL_SERVER_ERROR

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Business rule failure; subclasses declare ``code`` and ``status`` as class attributes."""

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            code=getattr(self, "code", "domain_error"),
            status=getattr(self, "status", HTTPStatus.BAD_REQUEST),
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(self, code: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(code=code, status=HTTPStatus.INTERNAL_SERVER_ERROR, context=context)


class ValidationError(AppError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            code="validation_error", status=HTTPStatus.UNPROCESSABLE_ENTITY, context=context
        )


class ConfigurationError(InfrastructureError):
    """Fatal misconfiguration detected while wiring the application."""

    def __init__(self, reason: str) -> None:
        super().__init__("configuration_error", context={"reason": reason})
        self.reason = reason

    def __str__(self) -> str:
        return f"configuration_error: {self.reason}"


class InternalError(InfrastructureError):
    """Opaque failure reported to clients; the cause is only logged."""

    def __init__(self) -> None:
        super().__init__("internal_error")


class UnauthorizedError(AppError):
    def __init__(self) -> None:
        super().__init__(code="unauthorized", status=HTTPStatus.UNAUTHORIZED)


class ForbiddenError(AppError):
    def __init__(self) -> None:
        super().__init__(code="forbidden", status=HTTPStatus.FORBIDDEN)
