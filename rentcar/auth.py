# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import wraps

from flask import g, request

from rentcar.domain.accounts.exceptions import InvalidTokenError
from rentcar.domain.accounts.repositories import SessionTokenIssuer
from rentcar.shared.errors import ForbiddenError, UnauthorizedError
from rentcar.shared.logging import logger


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth[:7].lower() == "bearer ":
        return auth[7:].strip()
    return ""


def auth_required(tokens: SessionTokenIssuer):
    """Require a valid bearer token whose subject owns the ``phone_number`` route arg."""

    def decorator(f):
        @wraps(f)
        def inner(*a, **kw):
            token = bearer_token()
            if not token:
                logger.warning(
                    f"No Authorization header on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise UnauthorizedError()

            try:
                claims = tokens.verify(token)
            except InvalidTokenError as exc:
                logger.warning(
                    f"Auth failed ({exc.code}) on {request.method} {request.path}"
                )
                raise UnauthorizedError() from exc

            g.phone_number = claims.subject
            owner = kw.get("phone_number")
            if owner is not None and owner != claims.subject:
                logger.warning(
                    f"Auth forbidden: token subject does not own {request.method} {request.path}"
                )
                raise ForbiddenError()

            logger.debug(f"Auth OK: phone={claims.subject} {request.method} {request.path}")
            return f(*a, **kw)

        return inner

    return decorator
