# jobsboard/tasks/mail_queue.py
from __future__ import annotations

import threading

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from jobsboard.config import MailSettings
from jobsboard.repositories.mail_request_repo import MailRequestRepo

MS_PER_DAY = 1000 * 60 * 60 * 24


def compute_interval_ms(limit_per_day: int) -> float:
    if isinstance(limit_per_day, bool) or not isinstance(limit_per_day, int):
        raise ValueError(f"Limit of emails per day must be an integer, got {limit_per_day!r}.")
    if limit_per_day <= 0:
        raise ValueError("Limit of emails per day cannot be less than or equal to zero.")
    return MS_PER_DAY / limit_per_day


class MailQueueWorker:
    """
    Delivers the oldest unsent mail request, one per tick.

    Single slot: a tick that starts while another one is still delivering is
    skipped, so two ticks never work on the queue at the same time.
    """

    IDLE = "idle"
    DELIVERING = "delivering"

    def __init__(self, settings: MailSettings, transport):
        self.settings = settings
        self.transport = transport
        self._slot = threading.Lock()

    @property
    def state(self) -> str:
        return self.DELIVERING if self._slot.locked() else self.IDLE

    def tick(self):
        """
        return: the MailRequest that was attempted, or None.
        Must run inside an app context.
        """
        if not self._slot.acquire(blocking=False):
            current_app.logger.info("[mail_queue] Previous delivery still in flight, tick skipped.")
            return None
        try:
            return self._deliver_next()
        finally:
            self._slot.release()

    def _deliver_next(self):
        try:
            row = MailRequestRepo.oldest_unsent()
        except SQLAlchemyError as e:
            MailRequestRepo.rollback()
            current_app.logger.error(f"[mail_queue] Could not read mail queue: {e}")
            return None

        if row is None:
            current_app.logger.info("[mail_queue] No mail request to send.")
            return None

        delivered = False
        error = None
        try:
            self.transport.send(row)
            delivered = True
            current_app.logger.info(f"[mail_queue] Successfully sent EMAIL={row.id}")
        except Exception as e:
            error = str(e) or e.__class__.__name__
            current_app.logger.error(f"[mail_queue] Failed to send EMAIL={row.id}: {error}")

        try:
            MailRequestRepo.record_attempt(row, delivered, error, self.settings.max_attempts)
        except SQLAlchemyError as e:
            MailRequestRepo.rollback()
            current_app.logger.error(f"[mail_queue] Could not update EMAIL={row.id}: {e}")
        return row
