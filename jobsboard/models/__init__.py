from jobsboard.models.admin_account import AdminAccount
from jobsboard.models.company import Company
from jobsboard.models.company_account import CompanyAccount
from jobsboard.models.job import Job
from jobsboard.models.mail_request import MailRequest

__all__ = ["AdminAccount", "Company", "CompanyAccount", "Job", "MailRequest"]
