from jobsboard.extensions import db
from jobsboard.models.admin_account import AdminAccount


class AdminRepo:
    @staticmethod
    def get_by_username(username: str):
        return AdminAccount.query.filter_by(username=username).first()

    @staticmethod
    def create(admin: AdminAccount):
        db.session.add(admin)
        db.session.commit()
        return admin
