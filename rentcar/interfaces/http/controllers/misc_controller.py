# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from rentcar import __version__
from rentcar.infrastructure.db import Database


class MiscController:
    def __init__(self, *, database: Database) -> None:
        self._database = database

    def health(self) -> tuple[Response, HTTPStatus]:
        database_ok = self._database.ping()
        body = {
            "ok": database_ok,
            "database": "ok" if database_ok else "error",
            "version": __version__,
        }
        status = HTTPStatus.OK if database_ok else HTTPStatus.SERVICE_UNAVAILABLE
        return jsonify(body), status

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp
