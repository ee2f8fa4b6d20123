# jobsboard/services/mail_transport.py
from __future__ import annotations

import json

from flask import current_app
from flask_mail import Message

from jobsboard.config import MailSettings
from jobsboard.extensions import mail
from jobsboard.models.mail_request import MailRequest


class SmtpTransport:
    """Real delivery through Flask-Mail (STARTTLS, see Config.MAIL_USE_TLS)."""

    def verify(self):
        try:
            with mail.connect():
                pass
        except Exception as e:
            current_app.logger.error(f"[mail_transport] Mail verification unsuccessful. Reason: {e}")
            raise RuntimeError("Failed to initialise mail service.") from e

    def send(self, row: MailRequest):
        msg = Message(
            subject=row.subject,
            sender=row.sender,
            recipients=[row.recipient],
            body=row.content,
            html=row.content,
        )
        mail.send(msg)


class LoggingTransport:
    """Stand-in outside production: logs the message instead of sending it."""

    def __init__(self, environment: str):
        self.environment = environment

    def verify(self):
        current_app.logger.info(
            f"[mail_transport] APP_ENV={self.environment}, emails will be logged, not sent."
        )

    def send(self, row: MailRequest):
        current_app.logger.info(
            f"[mail_transport] APP_ENV is not production (currently {self.environment}), "
            f"therefore no email will be sent. Here is the email that would have been sent: "
            f"{json.dumps(row.to_dict())}"
        )


def build_transport(settings: MailSettings):
    if settings.is_live:
        return SmtpTransport()
    return LoggingTransport(settings.environment)
