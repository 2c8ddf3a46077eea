from .base import (
    AppError,
    ConfigurationError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    InternalError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "AppError",
    "ConfigurationError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "InternalError",
    "UnauthorizedError",
    "ValidationError",
]
