# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import re
import secrets
import time
from collections.abc import Mapping

from flask import Flask, Response, g, request

from rentcar.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")
_HIDDEN_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization"})
_HIDDEN_PARAMS = ("password", "token", "secret")


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    return forwarded.split(",")[0].strip() or request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _safe_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        key: _fingerprint(value) if key.lower() in _HIDDEN_HEADERS else value
        for key, value in headers.items()
    }


def _safe_args(args: Mapping[str, str]) -> dict[str, str]:
    return {
        key: "<redacted>" if any(word in key.lower() for word in _HIDDEN_PARAMS) else value
        for key, value in args.items()
    }


def _incoming_request_id() -> str:
    # Caller-supplied ids end up in every log line, so only plain tokens are accepted.
    candidate = request.headers.get(REQUEST_ID_HEADER, "")
    if _REQUEST_ID_RE.match(candidate):
        return candidate
    return secrets.token_urlsafe(8)


def configure_request_logging(app: Flask, *, verbose: bool = False) -> None:
    """Log every request and tag its log lines with a correlation id.

    The id comes from ``X-Request-ID`` when the caller sends a usable one and
    is echoed back on the response. ``verbose`` adds redacted headers, query
    parameters and the authenticated phone number.
    """

    @app.before_request
    def _start() -> None:
        g.request_id = _incoming_request_id()
        g.request_started = time.perf_counter()
        set_correlation_id(g.request_id)
        if verbose:
            logger.info(
                f"http.start {request.method} {request.path} ip={_client_ip()} "
                f"args={_safe_args(request.args)} headers={_safe_headers(request.headers)} "
                f"body_bytes={request.content_length or 0}"
            )
        else:
            logger.info(f"http.start {request.method} {request.path} ip={_client_ip()}")

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        response.headers.setdefault(REQUEST_ID_HEADER, g.get("request_id", ""))
        suffix = f" phone={g.get('phone_number')}" if verbose else ""
        logger.info(
            f"http.end {request.method} {request.path} -> {response.status_code} "
            f"in {elapsed_ms:.1f} ms{suffix}"
        )
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"http.error {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
