# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import (
    MIN_TOKEN_SECRET_BYTES,
    SUPPORTED_TOKEN_ALGORITHMS,
    AppConfig,
    DatabaseConfig,
    MailConfig,
    SecurityConfig,
    TokenConfig,
    load_config,
)

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
