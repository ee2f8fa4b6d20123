from datetime import datetime, timedelta

import pytest

from jobsboard.extensions import db
from jobsboard.models.company_account import CompanyAccount
from jobsboard.models.job import Job
from jobsboard.models.mail_request import MailRequest

COMPANY = {
    "username": "hr@acme.com",
    "password": "hunter22",
    "name": "Acme",
    "location": "Sydney",
}


def _future(days=30):
    return (datetime.utcnow() + timedelta(days=days)).isoformat()


def _register(client, **overrides):
    return client.post("/company/", json={**COMPANY, **overrides})


def _login(client, username="hr@acme.com", password="hunter22"):
    res = client.post("/company/login", json={"username": username, "password": password})
    return {"Authorization": f"Bearer {res.get_json()['access_token']}"}


@pytest.fixture
def verified_company(app, client):
    _register(client)
    account = CompanyAccount.query.filter_by(username="hr@acme.com").one()
    account.verified = True
    db.session.commit()
    return _login(client)


def test_register_company_queues_welcome_mail(client, settings):
    res = _register(client)

    assert res.status_code == 201
    rows = MailRequest.query.order_by(MailRequest.id.asc()).all()
    assert [r.recipient for r in rows] == ["hr@acme.com", settings.sender, settings.oversight_address]
    assert rows[0].subject == "Thank you for adding your company to the CSESoc Jobs Board"
    assert settings.oversight_address in rows[0].content


def test_register_duplicate_is_conflict(client):
    assert _register(client).status_code == 201
    assert _register(client).status_code == 409
    assert _register(client, username="other@acme.com").status_code == 409
    assert MailRequest.query.count() == 3


def test_register_requires_all_fields(client):
    res = _register(client, location="  ")
    assert res.status_code == 400
    assert MailRequest.query.count() == 0


def test_register_succeeds_when_mail_queue_fails(client, monkeypatch):
    from jobsboard.services.mail_service import MailService
    monkeypatch.setattr(MailService, "add_mail_to_queue", staticmethod(lambda *a, **k: False))

    assert _register(client).status_code == 201


def test_login_rejects_bad_password(client):
    _register(client)
    res = client.post("/company/login", json={"username": "hr@acme.com", "password": "nope"})
    assert res.status_code == 401


def test_unverified_company_cannot_post_jobs(client):
    _register(client)
    headers = _login(client)

    res = client.post("/company/jobs", headers=headers, json={
        "role": "Intern", "description": "Do things",
        "applicationLink": "https://acme.com/apply", "expiry": _future(),
    })
    assert res.status_code == 403
    assert Job.query.count() == 0


def test_create_job_queues_submission_mail(client, verified_company):
    before = MailRequest.query.count()

    res = client.post("/company/jobs", headers=verified_company, json={
        "role": "Intern", "description": "Do things",
        "applicationLink": "mailto:hr@acme.com", "expiry": _future(),
    })

    assert res.status_code == 201
    job = Job.query.one()
    assert job.status == "pending"
    new_rows = MailRequest.query.order_by(MailRequest.id.asc()).all()[before:]
    assert len(new_rows) == 3
    assert new_rows[0].recipient == "hr@acme.com"
    assert new_rows[0].subject == "CSESoc Jobs Board - Job Post request submitted"

    listing = client.get("/company/jobs", headers=verified_company).get_json()["data"]
    assert [j["id"] for j in listing] == [job.id]


@pytest.mark.parametrize("overrides", [
    {"expiry": (datetime.utcnow() - timedelta(days=1)).isoformat()},
    {"expiry": "tomorrow"},
    {"applicationLink": "javascript:alert(1)"},
    {"role": ""},
])
def test_create_job_validation(client, verified_company, overrides):
    body = {
        "role": "Intern", "description": "Do things",
        "applicationLink": "https://acme.com/apply", "expiry": _future(),
        **overrides,
    }
    res = client.post("/company/jobs", headers=verified_company, json=body)
    assert res.status_code == 400
    assert Job.query.count() == 0


def test_forgot_password_unknown_account_queues_nothing(client):
    res = client.post("/company/forgot-password", json={"username": "ghost@x.com"})
    assert res.status_code == 200
    assert MailRequest.query.count() == 0


def test_password_reset_flow(client):
    _register(client)
    before = MailRequest.query.count()

    res = client.post("/company/forgot-password", json={"username": "hr@acme.com"})
    assert res.status_code == 200

    reset_mail = MailRequest.query.order_by(MailRequest.id.asc()).all()[before]
    assert reset_mail.recipient == "hr@acme.com"
    token = reset_mail.content.split("<code>", 1)[1].split("</code>", 1)[0]
    headers = {"Authorization": f"Bearer {token}"}

    # a reset token is not a login token
    assert client.get("/company/jobs", headers=headers).status_code == 403

    res = client.put("/company/reset-password", headers=headers, json={"password": "new-pass"})
    assert res.status_code == 200

    res = client.post("/company/login", json={"username": "hr@acme.com", "password": "new-pass"})
    assert res.status_code == 200


def test_login_token_cannot_reset_password(client):
    _register(client)
    res = client.put("/company/reset-password", headers=_login(client), json={"password": "x"})
    assert res.status_code == 403


def _reset_token(client):
    before = MailRequest.query.count()
    client.post("/company/forgot-password", json={"username": "hr@acme.com"})
    reset_mail = MailRequest.query.order_by(MailRequest.id.asc()).all()[before]
    return reset_mail.content.split("<code>", 1)[1].split("</code>", 1)[0]


def test_reset_token_works_only_once(client):
    _register(client)
    headers = {"Authorization": f"Bearer {_reset_token(client)}"}

    first = client.put("/company/reset-password", headers=headers, json={"password": "new-pass"})
    assert first.status_code == 200

    second = client.put("/company/reset-password", headers=headers, json={"password": "stolen"})
    assert second.status_code == 403

    assert client.post("/company/login", json={"username": "hr@acme.com", "password": "new-pass"}).status_code == 200
    assert client.post("/company/login", json={"username": "hr@acme.com", "password": "stolen"}).status_code == 401


def test_older_reset_token_dies_with_newer_reset(client):
    _register(client)
    old = {"Authorization": f"Bearer {_reset_token(client)}"}
    new = {"Authorization": f"Bearer {_reset_token(client)}"}

    assert client.put("/company/reset-password", headers=new, json={"password": "new-pass"}).status_code == 200
    assert client.put("/company/reset-password", headers=old, json={"password": "other"}).status_code == 403


def test_company_info(client):
    _register(client)

    res = client.get("/company/", headers=_login(client))

    assert res.status_code == 200
    assert res.get_json()["data"] == {
        "id": CompanyAccount.query.one().id,
        "username": "hr@acme.com",
        "verified": False,
        "name": "Acme",
        "location": "Sydney",
    }


def test_delete_job_hides_it(client, verified_company):
    res = client.post("/company/jobs", headers=verified_company, json={
        "role": "Intern", "description": "Do things",
        "applicationLink": "https://acme.com/apply", "expiry": _future(),
    })
    job_id = res.get_json()["id"]

    assert client.delete(f"/company/jobs/{job_id}", headers=verified_company).status_code == 200
    assert db.session.get(Job, job_id).deleted is True
    assert client.get("/company/jobs", headers=verified_company).get_json()["data"] == []
    assert client.delete(f"/company/jobs/{job_id}", headers=verified_company).status_code == 404


def test_cannot_delete_another_companys_job(client, verified_company):
    res = client.post("/company/jobs", headers=verified_company, json={
        "role": "Intern", "description": "Do things",
        "applicationLink": "https://acme.com/apply", "expiry": _future(),
    })
    job_id = res.get_json()["id"]

    _register(client, username="hr@globex.com", name="Globex")
    other = _login(client, username="hr@globex.com")

    assert client.delete(f"/company/jobs/{job_id}", headers=other).status_code == 404
    assert db.session.get(Job, job_id).deleted is False
