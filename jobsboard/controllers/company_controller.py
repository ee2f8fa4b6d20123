from flask import Blueprint, request, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity

from jobsboard.repositories.company_repo import CompanyRepo
from jobsboard.repositories.job_repo import JobRepo
from jobsboard.services.auth_service import AuthService
from jobsboard.services.company_service import CompanyService, ConflictError
from jobsboard.utils.decorators import role_required, reset_token_required

company_bp = Blueprint("company", __name__)


def _field(data, name):
    return (data.get(name) or "").strip()


@company_bp.post("/")
def register_company():
    data = request.get_json(silent=True) or {}

    username = _field(data, "username")
    password = _field(data, "password")
    name = _field(data, "name")
    location = _field(data, "location")

    if not username or not password or not name or not location:
        return jsonify({"success": False, "message": "username/password/name/location are required"}), 400

    try:
        account = CompanyService.register(username, password, name, location)
        return jsonify({"success": True, "id": account.id}), 201
    except ConflictError as e:
        return jsonify({"success": False, "message": str(e)}), 409


@company_bp.post("/login")
def login():
    data = request.get_json(silent=True) or {}
    try:
        token, account = AuthService.company_login(_field(data, "username"), _field(data, "password"))
        return jsonify({
            "success": True,
            "access_token": token,
            "company": {"id": account.id, "username": account.username, "verified": account.verified}
        })
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 401


@company_bp.get("/")
@role_required("company")
def company_info():
    try:
        account = CompanyService.get_info(int(get_jwt_identity()))
    except LookupError as e:
        return jsonify({"success": False, "message": str(e)}), 404
    return jsonify({"success": True, "data": {
        "id": account.id,
        "username": account.username,
        "verified": account.verified,
        "name": account.company.name,
        "location": account.company.location
    }})


@company_bp.get("/jobs")
@role_required("company")
def my_jobs():
    account_id = int(get_jwt_identity())
    account = CompanyRepo.get_account(account_id)
    if not account:
        return jsonify({"success": False, "message": "Company account not found"}), 404
    jobs = JobRepo.list_by_company(account.company_id)
    return jsonify({"success": True, "data": [
        {
            "id": j.id,
            "role": j.role,
            "expiry": j.expiry.isoformat(),
            "status": j.status
        } for j in jobs
    ]})


@company_bp.post("/jobs")
@role_required("company")
def create_job():
    data = request.get_json(silent=True) or {}

    role = _field(data, "role")
    description = _field(data, "description")
    application_link = _field(data, "applicationLink")
    expiry = _field(data, "expiry")
    if not role or not description or not application_link or not expiry:
        return jsonify({"success": False, "message": "role/description/applicationLink/expiry are required"}), 400

    try:
        job = CompanyService.create_job(int(get_jwt_identity()), role, description, application_link, expiry)
        return jsonify({"success": True, "id": job.id}), 201
    except LookupError as e:
        return jsonify({"success": False, "message": str(e)}), 404
    except PermissionError as e:
        return jsonify({"success": False, "message": str(e)}), 403
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400


@company_bp.post("/forgot-password")
def forgot_password():
    data = request.get_json(silent=True) or {}
    username = _field(data, "username")
    if not username:
        return jsonify({"success": False, "message": "username is required"}), 400

    # same answer for known and unknown accounts
    CompanyService.request_password_reset(username)
    return jsonify({"success": True, "message": "If the account exists, a reset email has been queued"})


@company_bp.put("/reset-password")
@reset_token_required
def reset_password():
    data = request.get_json(silent=True) or {}
    password = _field(data, "password")
    if not password:
        return jsonify({"success": False, "message": "password is required"}), 400
    try:
        CompanyService.reset_password(int(get_jwt_identity()), password, get_jwt().get("fingerprint"))
        return jsonify({"success": True})
    except LookupError as e:
        return jsonify({"success": False, "message": str(e)}), 404
    except PermissionError as e:
        return jsonify({"success": False, "message": str(e)}), 403


@company_bp.delete("/jobs/<int:job_id>")
@role_required("company")
def delete_job(job_id: int):
    try:
        CompanyService.delete_job(int(get_jwt_identity()), job_id)
        return jsonify({"success": True})
    except LookupError as e:
        return jsonify({"success": False, "message": str(e)}), 404
