# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class InvariantViolationError(Exception):
    """Persisted state that domain code refuses to interpret."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        base = super().__str__()
        return f"{self.field}: {base}" if self.field else base


class CorruptCredentialError(InvariantViolationError):
    """A stored password hash or salt does not have the shape the hasher writes.

    Distinct from a wrong password: the account cannot be authenticated at all
    until its credential is reset.
    """

    def __init__(self, field: str, *, expected: str, actual: int) -> None:
        super().__init__(f"expected {expected} bytes, got {actual}", field=field)
        self.expected = expected
        self.actual = actual
