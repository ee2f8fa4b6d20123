from datetime import datetime
from sqlalchemy import func

from jobsboard.extensions import db
from jobsboard.models.mail_request import MailRequest


class MailRequestRepo:
    @staticmethod
    def add_all(rows: list[MailRequest]):
        db.session.add_all(rows)

    @staticmethod
    def commit():
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()

    @staticmethod
    def get(mail_id: int):
        return db.session.get(MailRequest, mail_id)

    @staticmethod
    def oldest_unsent():
        # ties on created_at fall back to insertion order
        return MailRequest.query.filter(
            MailRequest.sent.is_(False)
        ).order_by(MailRequest.created_at.asc(), MailRequest.id.asc()).first()

    @staticmethod
    def mark_sent(mail_id: int, commit: bool = True):
        MailRequest.query.filter_by(id=mail_id).update({"sent": True})
        if commit:
            db.session.commit()

    @staticmethod
    def record_attempt(row: MailRequest, delivered: bool, error: str | None, max_attempts: int):
        row.attempts = (row.attempts or 0) + 1
        row.last_error = error[:500] if error else None
        if delivered:
            row.delivered_at = datetime.utcnow()
        if delivered or row.attempts >= max_attempts:
            MailRequestRepo.mark_sent(row.id, commit=False)
        db.session.commit()
        return row

    @staticmethod
    def stats() -> dict:
        pending = MailRequest.query.filter(MailRequest.sent.is_(False)).count()
        sent = MailRequest.query.filter(MailRequest.sent.is_(True)).count()
        delivered = MailRequest.query.filter(MailRequest.delivered_at.isnot(None)).count()
        oldest_pending = db.session.query(func.min(MailRequest.created_at)).filter(
            MailRequest.sent.is_(False)
        ).scalar()
        return {
            "pending": pending,
            "sent": sent,
            "delivered": delivered,
            "failed": sent - delivered,
            "oldest_pending_at": oldest_pending.isoformat() if oldest_pending else None,
        }
