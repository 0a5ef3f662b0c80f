from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import RelayConfig, get_relay_config
from app.relay import app

client = TestClient(app)

FIELDS = {
    "name": "A",
    "email": "a@b.com",
    "linkedinUrl": "https://www.linkedin.com/jobs/view/1",
}


@pytest.fixture
def upload_dir(tmp_path):
    target = tmp_path / "uploads"
    app.dependency_overrides[get_relay_config] = lambda: RelayConfig(host="127.0.0.1", port=3000, upload_dir=target)
    yield target
    app.dependency_overrides.clear()


def test_stores_file_and_echoes_fields(upload_dir):
    response = client.post(
        "/webhook",
        data=FIELDS,
        files={"resume": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Webhook received successfully"
    stored = body["data"]["resumeFile"]
    assert stored is not None
    assert stored.endswith("-cv.pdf")
    assert stored.split("-", 1)[0].isdigit()
    assert (upload_dir / stored).read_bytes() == b"%PDF-1.4"
    assert {k: body["data"][k] for k in FIELDS} == FIELDS


def test_without_file_returns_null(upload_dir):
    response = client.post("/webhook", data=FIELDS)

    assert response.status_code == 200
    assert response.json()["data"] == {**FIELDS, "resumeFile": None}


def test_strips_directories_from_filename(upload_dir):
    response = client.post(
        "/webhook",
        data=FIELDS,
        files={"resume": ("../../etc/cv.pdf", b"x", "application/pdf")},
    )

    stored = response.json()["data"]["resumeFile"]
    assert "/" not in stored
    assert (upload_dir / stored).exists()


def test_write_failure_returns_error_envelope(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("occupied")
    app.dependency_overrides[get_relay_config] = lambda: RelayConfig(host="127.0.0.1", port=3000, upload_dir=Path(blocker))
    try:
        response = client.post(
            "/webhook",
            data=FIELDS,
            files={"resume": ("cv.pdf", b"x", "application/pdf")},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Internal server error"
    assert body["message"]


def test_text_resume_field_counts_as_no_file(upload_dir):
    response = client.post("/webhook", data={**FIELDS, "resume": "notafile"})

    assert response.status_code == 200
    assert response.json()["data"] == {**FIELDS, "resumeFile": None}
    assert not upload_dir.exists() or not any(upload_dir.iterdir())
