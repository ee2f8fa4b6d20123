import hashlib
from datetime import timedelta

from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token

from jobsboard.models.admin_account import AdminAccount
from jobsboard.repositories.admin_repo import AdminRepo
from jobsboard.repositories.company_repo import CompanyRepo

RESET_PURPOSE = "password_reset"


class AuthService:
    @staticmethod
    def company_login(username: str, password: str):
        account = CompanyRepo.get_account_by_username(username)
        if not account or not check_password_hash(account.password_hash, password):
            raise ValueError("Invalid username or password")

        token = create_access_token(
            identity=str(account.id),
            additional_claims={"role": "company", "verified": account.verified}
        )
        return token, account

    @staticmethod
    def admin_login(username: str, password: str):
        admin = AdminRepo.get_by_username(username)
        if not admin or not check_password_hash(admin.password_hash, password):
            raise ValueError("Invalid username or password")

        token = create_access_token(identity=str(admin.id), additional_claims={"role": "admin"})
        return token, admin

    @staticmethod
    def create_admin(username: str, password: str):
        if AdminRepo.get_by_username(username):
            raise ValueError("Admin already exists")
        admin = AdminAccount(username=username, password_hash=generate_password_hash(password))
        return AdminRepo.create(admin)

    @staticmethod
    def password_fingerprint(password_hash: str) -> str:
        # changes whenever the password does, so a used reset token stops matching
        return hashlib.sha256(password_hash.encode()).hexdigest()[:16]

    @staticmethod
    def password_reset_token(account) -> str:
        minutes = current_app.config.get("PASSWORD_RESET_EXPIRES_MINUTES", 60)
        return create_access_token(
            identity=str(account.id),
            additional_claims={
                "role": "company",
                "purpose": RESET_PURPOSE,
                "fingerprint": AuthService.password_fingerprint(account.password_hash),
            },
            expires_delta=timedelta(minutes=minutes),
        )
