from datetime import datetime
from jobsboard.extensions import db


class CompanyAccount(db.Model):
    __tablename__ = "company_accounts"

    id = db.Column(db.Integer, primary_key=True)

    # contact email, also the login name
    username = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    verified = db.Column(db.Boolean, nullable=False, default=False)

    company_id = db.Column(db.Integer, db.ForeignKey("companies.id"), unique=True, nullable=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    company = db.relationship("Company", backref=db.backref("account", uselist=False))
