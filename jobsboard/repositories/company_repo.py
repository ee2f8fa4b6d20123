from jobsboard.extensions import db
from jobsboard.models.company import Company
from jobsboard.models.company_account import CompanyAccount


class CompanyRepo:
    @staticmethod
    def get_account(account_id: int):
        return db.session.get(CompanyAccount, account_id)

    @staticmethod
    def get_account_by_username(username: str):
        return CompanyAccount.query.filter_by(username=username).first()

    @staticmethod
    def get_by_name(name: str):
        return Company.query.filter_by(name=name).first()

    @staticmethod
    def create(account: CompanyAccount):
        db.session.add(account)
        db.session.commit()
        return account

    @staticmethod
    def commit():
        db.session.commit()
