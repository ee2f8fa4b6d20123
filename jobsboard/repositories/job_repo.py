from jobsboard.extensions import db
from jobsboard.models.job import Job


class JobRepo:
    @staticmethod
    def get(job_id: int):
        return db.session.get(Job, job_id)

    @staticmethod
    def list_by_company(company_id: int):
        return Job.query.filter_by(company_id=company_id, deleted=False).order_by(Job.id.desc()).all()

    @staticmethod
    def list_pending():
        return Job.query.filter_by(status="pending", deleted=False).order_by(Job.created_at.asc()).all()

    @staticmethod
    def create(job: Job):
        db.session.add(job)
        db.session.commit()
        return job

    @staticmethod
    def commit():
        db.session.commit()
