from jobsboard.models.mail_request import MailRequest


def test_mail_routes_require_a_token(client):
    assert client.post("/mail/test").status_code == 401
    assert client.get("/mail/queue").status_code == 401
    assert client.post("/mail/run").status_code == 401


def test_test_email_is_queued_for_oversight(client, admin_headers, settings):
    res = client.post("/mail/test", headers=admin_headers)

    assert res.status_code == 200
    rows = MailRequest.query.order_by(MailRequest.id.asc()).all()
    assert len(rows) == 3
    assert rows[0].recipient == settings.oversight_address
    assert rows[0].subject == "Scheduled emailing"


def test_run_delivers_one_and_queue_reports_it(client, admin_headers):
    client.post("/mail/test", headers=admin_headers)

    data = client.post("/mail/run", headers=admin_headers).get_json()["data"]
    assert data["sent"] is True
    assert data["delivered"] is True
    assert data["attempts"] == 1

    stats = client.get("/mail/queue", headers=admin_headers).get_json()["data"]
    assert stats["pending"] == 2
    assert stats["sent"] == 1
    assert stats["delivered"] == 1
    assert stats["worker"] == "idle"
    assert stats["scheduled"] is False


def test_run_on_empty_queue(client, admin_headers):
    res = client.post("/mail/run", headers=admin_headers)
    assert res.status_code == 200
    assert res.get_json()["data"] is None
