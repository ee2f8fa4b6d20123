# jobsboard/tasks/scheduler.py
from __future__ import annotations

import os

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from jobsboard.services.mail_transport import build_transport
from jobsboard.tasks.mail_queue import MailQueueWorker, compute_interval_ms


def init_mail_scheduler(app, limit_per_day: int):
    """
    Arms the recurring mail delivery job.

    - Configuration errors (bad limit, missing SMTP credentials, failed SMTP
      verify) raise before anything is scheduled.
    - Each tick runs inside an app context.
    - Werkzeug's debug reloader runs two processes; only the real one schedules.
    """
    interval_ms = compute_interval_ms(limit_per_day)
    app.logger.info(f"[scheduler] Mail sending rate set to once every {interval_ms} ms.")

    if app.debug and os.environ.get("WERKZEUG_RUN_MAIN") != "true":
        app.logger.info("[scheduler] Debug reloader secondary process: scheduler skipped.")
        return None

    settings = app.extensions["mail_settings"]
    if settings.is_live:
        settings.require_smtp_credentials()

    transport = build_transport(settings)
    with app.app_context():
        transport.verify()

    worker = MailQueueWorker(settings, transport)

    def _job_wrapper():
        with app.app_context():
            try:
                worker.tick()
            except Exception as ex:
                app.logger.exception(f"[scheduler] mail_queue_job error: {ex}")

    scheduler = BackgroundScheduler(timezone="UTC")
    scheduler.add_job(
        func=_job_wrapper,
        trigger=IntervalTrigger(seconds=interval_ms / 1000),
        id="mail_queue_job",
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    app.logger.info("[scheduler] Mail queue job started.")

    app.extensions["mail_queue_worker"] = worker
    app.extensions["apscheduler"] = scheduler
    return scheduler
