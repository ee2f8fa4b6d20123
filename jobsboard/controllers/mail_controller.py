from flask import Blueprint, current_app, jsonify

from jobsboard.repositories.mail_request_repo import MailRequestRepo
from jobsboard.services import mail_templates
from jobsboard.services.mail_service import MailService
from jobsboard.services.mail_transport import build_transport
from jobsboard.tasks.mail_queue import MailQueueWorker
from jobsboard.utils.decorators import role_required

mail_bp = Blueprint("mail", __name__)


def _worker() -> MailQueueWorker:
    # the scheduler's worker when it is running, so manual runs share its slot
    worker = current_app.extensions.get("mail_queue_worker")
    if worker is None:
        settings = MailService.get_settings()
        worker = MailQueueWorker(settings, build_transport(settings))
        current_app.extensions["mail_queue_worker"] = worker
    return worker


@mail_bp.post("/test")
@role_required("admin")
def send_test_email():
    settings = MailService.get_settings()
    subject, content = mail_templates.test_mail()
    if MailService.add_mail_to_queue(settings, settings.oversight_address, subject, content):
        current_app.logger.info("[mail] Successfully scheduled email request.")
    else:
        current_app.logger.error("[mail] Failed to schedule email.")
    return jsonify({"success": True})


@mail_bp.get("/queue")
@role_required("admin")
def queue_status():
    stats = MailRequestRepo.stats()
    stats["worker"] = _worker().state
    stats["scheduled"] = "apscheduler" in current_app.extensions
    return jsonify({"success": True, "data": stats})


@mail_bp.post("/run")
@role_required("admin")
def run_queue_once():
    row = _worker().tick()
    if row is None:
        return jsonify({"success": True, "data": None})
    return jsonify({"success": True, "data": {
        "id": row.id,
        "recipient": row.recipient,
        "sent": row.sent,
        "attempts": row.attempts,
        "delivered": row.delivered_at is not None,
        "last_error": row.last_error
    }})
