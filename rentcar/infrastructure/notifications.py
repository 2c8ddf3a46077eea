# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Fire-and-forget delivery of account notifications."""

from __future__ import annotations

import threading

from rentcar.domain.accounts.repositories import NotificationDispatcher, RegistrationNotifier
from rentcar.shared.logging import correlation_scope, get_correlation_id, logger


class ThreadedNotificationDispatcher(NotificationDispatcher):
    """Runs each notice on its own daemon thread with an isolated error boundary."""

    def __init__(self, notifier: RegistrationNotifier) -> None:
        self._notifier = notifier

    def _run(self, correlation_id: str, email: str, first_name: str, last_name: str) -> None:
        with correlation_scope(correlation_id):
            try:
                self._notifier.send_registration_notice(email, first_name, last_name)
            except Exception:
                logger.exception(f"notify.registration: delivery failed to={email}")

    def dispatch_registration_notice(
        self, email: str, first_name: str, last_name: str
    ) -> threading.Thread:
        worker = threading.Thread(
            target=self._run,
            args=(get_correlation_id(), email, first_name, last_name),
            name="registration-notice",
            daemon=True,
        )
        worker.start()
        logger.debug(f"notify.registration: dispatched to={email}")
        return worker


__all__ = ["ThreadedNotificationDispatcher"]
