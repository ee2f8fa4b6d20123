import click
from flask import Flask, jsonify

from jobsboard.config import Config, MailSettings
from jobsboard.extensions import db, migrate, jwt, mail


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    mail.init_app(app)

    # read once, handed to the queue components from here on
    app.extensions["mail_settings"] = MailSettings.from_config(app.config)

    from jobsboard import models  # noqa: F401  (register tables)
    from jobsboard.controllers.admin_controller import admin_bp
    from jobsboard.controllers.company_controller import company_bp
    from jobsboard.controllers.mail_controller import mail_bp
    app.register_blueprint(company_bp, url_prefix="/company")
    app.register_blueprint(admin_bp, url_prefix="/admin")
    app.register_blueprint(mail_bp, url_prefix="/mail")

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    @app.cli.command("create-admin")
    @click.argument("username")
    @click.argument("password")
    def create_admin(username, password):
        """Create an admin account."""
        from jobsboard.services.auth_service import AuthService
        try:
            AuthService.create_admin(username, password)
        except ValueError as e:
            raise click.ClickException(str(e))
        click.echo(f"Created admin {username}")

    if app.config.get("MAIL_QUEUE_ENABLED"):
        from jobsboard.tasks.scheduler import init_mail_scheduler
        init_mail_scheduler(app, app.extensions["mail_settings"].daily_limit)

    return app
