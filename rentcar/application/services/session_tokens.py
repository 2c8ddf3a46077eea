"""Stateless bearer tokens signed with the configured secret."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

from rentcar.domain.accounts.entities import SessionClaims
from rentcar.domain.accounts.exceptions import InvalidTokenError
from rentcar.domain.accounts.repositories import SessionTokenIssuer
from rentcar.shared.config import MIN_TOKEN_SECRET_BYTES, SUPPORTED_TOKEN_ALGORITHMS, TokenConfig
from rentcar.shared.errors import ConfigurationError
from rentcar.shared.logging import logger


class JwtSessionTokenIssuer(SessionTokenIssuer):
    """Issues and verifies HMAC-signed JWTs carrying the account phone number.

    The configuration is validated on construction so that a missing or weak
    secret stops the application while it is being wired, not on the first
    login.
    """

    def __init__(self, config: TokenConfig) -> None:
        secret = config.secret
        if not secret:
            raise ConfigurationError("TOKEN_SECRET is not set")
        if len(secret.encode("utf-8")) < MIN_TOKEN_SECRET_BYTES:
            raise ConfigurationError(
                f"TOKEN_SECRET must be at least {MIN_TOKEN_SECRET_BYTES} bytes long"
            )
        if config.algorithm not in SUPPORTED_TOKEN_ALGORITHMS:
            raise ConfigurationError(f"unsupported TOKEN_ALGORITHM {config.algorithm!r}")

        self._secret = secret
        self._algorithm = config.algorithm
        self._lifetime = timedelta(hours=config.lifetime_hours)
        self._subject_claim = config.subject_claim

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, subject: str, *, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(UTC)
        claims = {
            self._subject_claim: subject,
            "iat": issued_at,
            "nbf": issued_at,
            "exp": issued_at + self._lifetime,
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        logger.debug(f"tokens.issue: exp={claims['exp'].isoformat()}")
        return token

    def verify(self, token: str, *, now: datetime | None = None) -> SessionClaims:
        if not token:
            raise InvalidTokenError()
        try:
            if now is None:
                data: dict = jwt.decode(
                    token,
                    self._secret,
                    algorithms=[self._algorithm],
                    options={"require": ["exp", "iat", self._subject_claim]},
                )
            else:
                data = jwt.decode(
                    token,
                    self._secret,
                    algorithms=[self._algorithm],
                    options={
                        "require": ["exp", "iat", self._subject_claim],
                        "verify_exp": False,
                        "verify_nbf": False,
                        "verify_iat": False,
                    },
                )
                if now.timestamp() >= data["exp"]:
                    raise jwt.ExpiredSignatureError("Signature has expired")
                if now.timestamp() < data.get("nbf", data["iat"]):
                    raise jwt.ImmatureSignatureError("The token is not yet valid (nbf)")
        except jwt.ExpiredSignatureError as exc:
            logger.info("tokens.verify: expired token")
            raise InvalidTokenError(context={"reason": "expired"}) from exc
        except jwt.PyJWTError as exc:
            logger.warning(f"tokens.verify: rejected token ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        subject = data.get(self._subject_claim)
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError()

        return SessionClaims(
            subject=subject,
            issued_at=datetime.fromtimestamp(data["iat"], UTC),
            expires_at=datetime.fromtimestamp(data["exp"], UTC),
        )
