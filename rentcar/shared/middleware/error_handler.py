# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from rentcar.shared.errors import AppError
from rentcar.shared.logging import logger


def app_error_response(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    if error.status == HTTPStatus.UNAUTHORIZED:
        response.headers["WWW-Authenticate"] = 'Bearer realm="rentcar"'
    return response, error.status


def configure_error_handling(app: Flask, *, verbose: bool = False) -> None:
    """Turn every failure into a JSON body.

    ``AppError`` keeps its own code and status. Werkzeug HTTP errors (404 on an
    unknown route, 405) pass through. Anything else is logged with its
    traceback and reported as an opaque ``internal_error``.
    """

    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        where = f"{request.method} {request.path}"
        if exc.is_server_error:
            logger.opt(exception=exc.__cause__ or exc).error(f"http.app_error {exc.code} on {where}")
        else:
            logger.info(f"http.app_error {exc.code} on {where}")
        return app_error_response(exc)

    @app.errorhandler(HTTPException)
    def _on_http_exception(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        where = f"{request.method} {request.path}"
        if verbose:
            logger.opt(exception=exc).error(
                f"http.unhandled {type(exc).__name__} on {where} "
                f"phone={g.get('phone_number')} args={sorted(request.args)}"
            )
        else:
            logger.opt(exception=exc).error(f"http.unhandled {type(exc).__name__} on {where}")
        return jsonify({"error": "internal_error"}), HTTPStatus.INTERNAL_SERVER_ERROR


__all__ = ["app_error_response", "configure_error_handling"]
