# jobsboard/models/mail_request.py
from datetime import datetime
from jobsboard.extensions import db


class MailRequest(db.Model):
    __tablename__ = "mail_requests"

    id = db.Column(db.Integer, primary_key=True)

    sender = db.Column(db.String(255), nullable=True)
    recipient = db.Column(db.String(255), nullable=True)
    subject = db.Column(db.String(255), nullable=True)
    content = db.Column(db.Text, nullable=True)

    # False -> True exactly once, never reverts
    sent = db.Column(db.Boolean, nullable=False, default=False, index=True)
    attempts = db.Column(db.Integer, nullable=False, default=0)
    last_error = db.Column(db.String(500), nullable=True)
    delivered_at = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sender": self.sender,
            "recipient": self.recipient,
            "subject": self.subject,
            "content": self.content,
            "sent": self.sent,
            "attempts": self.attempts,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
