from datetime import datetime
from jobsboard.extensions import db


class Job(db.Model):
    __tablename__ = "jobs"

    id = db.Column(db.Integer, primary_key=True)

    company_id = db.Column(db.Integer, db.ForeignKey("companies.id"), nullable=False, index=True)

    role = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    application_link = db.Column(db.String(500), nullable=False)
    expiry = db.Column(db.DateTime, nullable=False)

    status = db.Column(db.String(20), nullable=False, default="pending")  # pending/approved/rejected
    deleted = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    company = db.relationship("Company", backref="jobs")
