import re
from datetime import datetime, timezone

from flask import current_app
from werkzeug.security import generate_password_hash

from jobsboard.models.company import Company
from jobsboard.models.company_account import CompanyAccount
from jobsboard.models.job import Job
from jobsboard.repositories.company_repo import CompanyRepo
from jobsboard.repositories.job_repo import JobRepo
from jobsboard.services import mail_templates
from jobsboard.services.auth_service import AuthService
from jobsboard.services.mail_service import MailService

APPLICATION_LINK_RE = re.compile(r"^(https?://\S+|mailto:\S+@\S+)$")


class ConflictError(ValueError):
    pass


class CompanyService:
    @staticmethod
    def register(username: str, password: str, name: str, location: str):
        current_app.logger.info(
            f"Attempting to create company with USERNAME={username} NAME={name} LOCATION={location}"
        )
        if CompanyRepo.get_account_by_username(username) or CompanyRepo.get_by_name(name):
            raise ConflictError("Company or account already exists")

        company = Company(name=name, location=location)
        account = CompanyAccount(
            username=username,
            password_hash=generate_password_hash(password),
            company=company,
        )
        CompanyRepo.create(account)
        current_app.logger.info(f"Created company with USERNAME={username} NAME={name}")

        settings = MailService.get_settings()
        subject, content = mail_templates.company_registered(settings.oversight_address)
        MailService.queue_for_event(account.username, subject, content)
        return account

    @staticmethod
    def _parse_expiry(raw) -> datetime:
        try:
            expiry = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
        except ValueError:
            raise ValueError("expiry must be an ISO date")
        if expiry.tzinfo is not None:
            expiry = expiry.astimezone(timezone.utc).replace(tzinfo=None)
        if expiry <= datetime.utcnow():
            raise ValueError("expiry must be in the future")
        return expiry

    @staticmethod
    def create_job(account_id: int, role: str, description: str, application_link: str, expiry):
        account = CompanyRepo.get_account(account_id)
        if not account:
            raise LookupError("Company account not found")
        if not account.verified:
            raise PermissionError("Company account is not verified")

        if not APPLICATION_LINK_RE.match(application_link):
            raise ValueError("applicationLink must be an http(s) or mailto link")

        job = Job(
            company_id=account.company_id,
            role=role,
            description=description,
            application_link=application_link,
            expiry=CompanyService._parse_expiry(expiry),
        )
        JobRepo.create(job)
        current_app.logger.info(f"Created JOB={job.id} for COMPANY_ACCOUNT={account_id}")

        subject, content = mail_templates.job_submitted(job.role)
        MailService.queue_for_event(account.username, subject, content)
        return job

    @staticmethod
    def request_password_reset(username: str) -> bool:
        account = CompanyRepo.get_account_by_username(username)
        if not account:
            current_app.logger.info(f"Password reset requested for unknown USERNAME={username}")
            return False

        token = AuthService.password_reset_token(account)
        minutes = current_app.config.get("PASSWORD_RESET_EXPIRES_MINUTES", 60)
        subject, content = mail_templates.password_reset(token, minutes)
        return MailService.queue_for_event(account.username, subject, content)

    @staticmethod
    def reset_password(account_id: int, new_password: str, fingerprint: str | None):
        account = CompanyRepo.get_account(account_id)
        if not account:
            raise LookupError("Company account not found")
        if fingerprint != AuthService.password_fingerprint(account.password_hash):
            raise PermissionError("Reset token has already been used")
        account.password_hash = generate_password_hash(new_password)
        CompanyRepo.commit()
        current_app.logger.info(f"Password reset for COMPANY_ACCOUNT={account_id}")
        return account

    @staticmethod
    def get_info(account_id: int):
        account = CompanyRepo.get_account(account_id)
        if not account:
            raise LookupError("Company account not found")
        return account

    @staticmethod
    def delete_job(account_id: int, job_id: int):
        """
        Soft delete: the row stays for moderation history but is hidden from listings.
        """
        account = CompanyRepo.get_account(account_id)
        job = JobRepo.get(job_id)
        if not account or not job or job.deleted or job.company_id != account.company_id:
            raise LookupError("Job not found")

        job.deleted = True
        JobRepo.commit()
        current_app.logger.info(f"COMPANY_ACCOUNT={account_id} marked JOB={job_id} as deleted")
        return job
