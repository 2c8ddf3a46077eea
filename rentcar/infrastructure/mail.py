# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import smtplib
from email.message import EmailMessage

from rentcar.domain.accounts.repositories import RegistrationNotifier
from rentcar.shared.config import MailConfig
from rentcar.shared.logging import logger

REGISTRATION_SUBJECT = "Welcome to RentCar"


def build_registration_message(
    *, sender: str, email: str, first_name: str, last_name: str
) -> EmailMessage:
    message = EmailMessage()
    message["From"] = sender
    message["To"] = email
    message["Subject"] = REGISTRATION_SUBJECT
    message.set_content(
        f"Hello {first_name} {last_name},\n\n"
        "Your RentCar account has been created. You can now sign in with your "
        "phone number and password.\n\n"
        "The RentCar team\n"
    )
    return message


class SmtpRegistrationNotifier(RegistrationNotifier):
    """Sends the welcome e-mail through a plain SMTP relay."""

    def __init__(self, config: MailConfig) -> None:
        self._config = config

    def send_registration_notice(self, email: str, first_name: str, last_name: str) -> None:
        message = build_registration_message(
            sender=self._config.sender,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        if not self._config.enabled:
            logger.info(f"mail.registration: delivery disabled, skipping to={email}")
            return

        with smtplib.SMTP(
            host=self._config.host, port=self._config.port, timeout=self._config.timeout
        ) as conn:
            if self._config.use_tls:
                conn.starttls()
            if self._config.username:
                conn.login(self._config.username, self._config.password or "")
            conn.send_message(message)
        logger.info(f"mail.registration: sent to={email}")


__all__ = ["SmtpRegistrationNotifier", "build_registration_message"]
