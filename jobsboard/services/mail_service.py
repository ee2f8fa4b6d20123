# jobsboard/services/mail_service.py
from __future__ import annotations

from flask import current_app

from jobsboard.config import MailSettings
from jobsboard.models.mail_request import MailRequest
from jobsboard.repositories.mail_request_repo import MailRequestRepo


COPY_TEMPLATE = (
    'The following was sent to "{recipient}" with subject "{subject}":\n'
    "\n"
    "CONTENT BEGINS HERE\n"
    "------------------------\n"
    "{content}\n"
)


class MailService:
    @staticmethod
    def get_settings() -> MailSettings:
        return current_app.extensions["mail_settings"]

    @staticmethod
    def copy_content(recipient: str | None, subject: str | None, content: str | None) -> str:
        return COPY_TEMPLATE.format(recipient=recipient, subject=subject, content=content)

    @staticmethod
    def _missing_fields(settings: MailSettings, recipient, subject, content) -> list[str]:
        """
        Each field is checked on its own so that every gap gets its own log line.
        """
        missing = []
        for name, value in (
            ("sender", settings.sender),
            ("recipient", recipient),
            ("subject", subject),
            ("content", content),
        ):
            if value is None or not str(value).strip():
                current_app.logger.warning(f"[mail_service] {name} parameter checking failed")
                missing.append(name)
        return missing

    @staticmethod
    def add_mail_to_queue(
        settings: MailSettings,
        recipient: str | None,
        subject: str | None,
        content: str | None,
    ) -> bool:
        """
        Queues one mail for `recipient` plus two audit copies (the sending
        account itself and the oversight mailbox).

        return: True when all three rows were committed. Never raises.
        """
        try:
            missing = MailService._missing_fields(settings, recipient, subject, content)
            if missing and settings.strict_validation:
                current_app.logger.error(
                    f"[mail_service] Mail not queued, missing: {', '.join(missing)}"
                )
                return False

            copy = MailService.copy_content(recipient, subject, content)
            rows = [
                MailRequest(
                    sender=settings.sender,
                    recipient=recipient,
                    subject=subject,
                    content=content,
                ),
                MailRequest(
                    sender=settings.sender,
                    recipient=settings.sender,
                    subject=subject,
                    content=copy,
                ),
                MailRequest(
                    sender=settings.sender,
                    recipient=settings.oversight_address,
                    subject=subject,
                    content=copy,
                ),
            ]
            MailRequestRepo.add_all(rows)
            MailRequestRepo.commit()

            current_app.logger.info(
                f"[mail_service] Queued mail to {recipient} with ids={[r.id for r in rows]}"
            )
            return True
        except Exception as e:
            MailRequestRepo.rollback()
            current_app.logger.error(f"[mail_service] add_mail_to_queue FAILED with error {e}")
            return False

    @staticmethod
    def queue_for_event(recipient: str, subject: str, content: str) -> bool:
        """
        Fire-and-forget helper for request handlers: the response never depends on it.
        """
        ok = MailService.add_mail_to_queue(MailService.get_settings(), recipient, subject, content)
        if not ok:
            current_app.logger.warning(f"[mail_service] Could not queue '{subject}' for {recipient}")
        return ok
