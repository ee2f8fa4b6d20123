from flask import Blueprint, request, jsonify

from jobsboard.repositories.job_repo import JobRepo
from jobsboard.services.admin_service import AdminService
from jobsboard.services.auth_service import AuthService
from jobsboard.utils.decorators import role_required

admin_bp = Blueprint("admin", __name__)


@admin_bp.post("/login")
def login():
    data = request.get_json(silent=True) or {}
    try:
        token, admin = AuthService.admin_login(
            (data.get("username") or "").strip(),
            (data.get("password") or "").strip()
        )
        return jsonify({"success": True, "access_token": token, "admin": {"id": admin.id}})
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 401


@admin_bp.patch("/companies/<int:account_id>/verify")
@role_required("admin")
def verify_company(account_id: int):
    try:
        account = AdminService.verify_company(account_id)
        return jsonify({"success": True, "id": account.id, "verified": account.verified})
    except LookupError as e:
        return jsonify({"success": False, "message": str(e)}), 404
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400


@admin_bp.get("/jobs/pending")
@role_required("admin")
def pending_jobs():
    jobs = JobRepo.list_pending()
    return jsonify({"success": True, "data": [
        {
            "id": j.id,
            "company": j.company.name if j.company else None,
            "role": j.role,
            "description": j.description,
            "applicationLink": j.application_link,
            "expiry": j.expiry.isoformat()
        } for j in jobs
    ]})


def _moderate(job_id: int, approve: bool):
    data = request.get_json(silent=True) or {}
    try:
        job = AdminService.moderate_job(job_id, approve, (data.get("reason") or "").strip() or None)
        return jsonify({"success": True, "id": job.id, "status": job.status})
    except LookupError as e:
        return jsonify({"success": False, "message": str(e)}), 404
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400


@admin_bp.patch("/jobs/<int:job_id>/approve")
@role_required("admin")
def approve_job(job_id: int):
    return _moderate(job_id, True)


@admin_bp.patch("/jobs/<int:job_id>/reject")
@role_required("admin")
def reject_job(job_id: int):
    return _moderate(job_id, False)
