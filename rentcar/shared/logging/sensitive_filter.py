# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any, NamedTuple

REDACTED = "***REDACTED***"


class _Rule(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    replacement: str


def _rule(name: str, pattern: str, replacement: str, flags: int = 0) -> _Rule:
    return _Rule(name, re.compile(pattern, flags), replacement)


# Applied in order; JWTs go before the generic token rules so they keep their marker.
RULES: tuple[_Rule, ...] = (
    _rule("jwt", r"\beyJ[\w-]+\.[\w-]+\.[\w-]+", "***JWT***"),
    _rule("bearer", r"(bearer\s+)[\w.~+/-]{8,}=*", rf"\1{REDACTED}", re.IGNORECASE),
    _rule(
        "signing_secret",
        r"((?:token|jwt|mail)[_-]?(?:secret|password)\s*[:=]\s*['\"]?)[^'\"\s]+",
        rf"\1{REDACTED}",
        re.IGNORECASE,
    ),
    _rule("password", r"(password\s*[:=]\s*['\"]?)[^'\"\s]+", rf"\1{REDACTED}", re.IGNORECASE),
    _rule(
        "database_url",
        r"\b((?:postgresql|postgres|mysql|mariadb|mssql)(?:\+\w+)?://[^:/\s]+:)[^@\s]+@",
        rf"\1{REDACTED}@",
    ),
    _rule("email", r"\b[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,})\b", r"***@\1"),
    # Only the last two digits of a phone number survive so log lines stay correlatable.
    _rule("phone", r"(phone\s*=\s*['\"]?)\+?\d{3,13}(\d{2})\b", r"\1***\2", re.IGNORECASE),
)


def sanitize_message(message: str) -> str:
    for rule in RULES:
        message = rule.pattern.sub(rule.replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru ``filter`` hook: scrub the message in place and keep the record."""
    message = record.get("message")
    if message:
        record["message"] = sanitize_message(message)
    return True
