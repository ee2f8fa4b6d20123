from flask import current_app

from jobsboard.repositories.company_repo import CompanyRepo
from jobsboard.repositories.job_repo import JobRepo
from jobsboard.services import mail_templates
from jobsboard.services.mail_service import MailService


class AdminService:
    @staticmethod
    def verify_company(account_id: int):
        account = CompanyRepo.get_account(account_id)
        if not account:
            raise LookupError("Company account not found")
        if account.verified:
            raise ValueError("Company account already verified")

        account.verified = True
        CompanyRepo.commit()
        current_app.logger.info(f"Verified COMPANY_ACCOUNT={account_id}")

        subject, content = mail_templates.company_verified(account.company.name)
        MailService.queue_for_event(account.username, subject, content)
        return account

    @staticmethod
    def moderate_job(job_id: int, approve: bool, reason: str | None = None):
        job = JobRepo.get(job_id)
        if not job or job.deleted:
            raise LookupError("Job not found")
        if job.status != "pending":
            raise ValueError(f"Job already {job.status}")

        job.status = "approved" if approve else "rejected"
        JobRepo.commit()
        current_app.logger.info(f"JOB={job_id} {job.status}")

        if approve:
            subject, content = mail_templates.job_approved(job.role)
        else:
            subject, content = mail_templates.job_rejected(job.role, reason)
        account = job.company.account if job.company else None
        if account:
            MailService.queue_for_event(account.username, subject, content)
        return job
