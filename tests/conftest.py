import pytest

from jobsboard import create_app
from jobsboard.config import TestConfig
from jobsboard.extensions import db
from jobsboard.services.auth_service import AuthService


class StubTransport:
    """Records every mail it is asked to send; optionally fails."""

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    def verify(self):
        pass

    def send(self, row):
        self.sent.append(row.id)
        if self.error:
            raise self.error


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def settings(app):
    return app.extensions["mail_settings"]


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def admin_headers(app, client):
    AuthService.create_admin("admin", "admin-pass")
    res = client.post("/admin/login", json={"username": "admin", "password": "admin-pass"})
    return {"Authorization": f"Bearer {res.get_json()['access_token']}"}
