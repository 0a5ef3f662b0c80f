import os

# Config is read at import time by the API modules
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("AUTOMATION_WEBHOOK_URL", "https://hooks.test/automation")

from typing import Any, Dict, List, Optional

import httpx
import pytest

from app.config import get_config
from app.schemas.submission import ResumeFile, Submission
from app.services.stores import ObjectStore, RecordStore
from app.services.submission_service import SubmissionService
from app.services.webhook_client import WebhookClient
from app.utils.exceptions import PersistenceError, UploadError


class FakeObjectStore(ObjectStore):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.files: Dict[str, bytes] = {}

    def put(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        if self.fail:
            raise UploadError(component="FakeObjectStore")
        self.files[key] = content

    def public_url(self, key: str) -> str:
        return f"https://storage.test/resumes/{key}"


class FakeRecordStore(RecordStore):
    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None,
                 fail_insert: bool = False, fail_update: bool = False, fail_lookup: bool = False):
        self.rows = {row["email"]: dict(row) for row in (rows or [])}
        self.fail_insert = fail_insert
        self.fail_update = fail_update
        self.fail_lookup = fail_lookup
        self.insert_calls: List[Dict[str, Any]] = []
        self.update_calls: List[Dict[str, Any]] = []

    def find_by_key(self, key: str) -> Optional[Dict[str, Any]]:
        if self.fail_lookup:
            raise RuntimeError("JSON object requested, multiple (or no) rows returned")
        return self.rows.get(key)

    def insert(self, record: Dict[str, Any]) -> None:
        self.insert_calls.append(record)
        if self.fail_insert:
            raise PersistenceError(PersistenceError.INSERT_MESSAGE, "FakeRecordStore")
        self.rows[record["email"]] = dict(record)

    def update(self, key: str, fields: Dict[str, Any]) -> None:
        self.update_calls.append(fields)
        if self.fail_update:
            raise PersistenceError(PersistenceError.UPDATE_MESSAGE, "FakeRecordStore")
        self.rows[key].update(fields)


class WebhookRecorder:
    """httpx.MockTransport handler that records requests and answers with a fixed status."""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text="Accepted" if self.status_code < 300 else "Nope")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def config():
    return get_config()


@pytest.fixture
def object_store():
    return FakeObjectStore()


@pytest.fixture
def record_store():
    return FakeRecordStore()


@pytest.fixture
def webhook():
    return WebhookRecorder()


@pytest.fixture
def make_service(config):
    def _make(object_store, record_store, webhook):
        return SubmissionService(
            config,
            object_store=object_store,
            record_store=record_store,
            webhook_client=WebhookClient(config, transport=webhook.transport),
        )
    return _make


@pytest.fixture
def service(make_service, object_store, record_store, webhook):
    return make_service(object_store, record_store, webhook)


@pytest.fixture
def submission():
    return Submission(
        name="Ada Lovelace",
        email="ada@example.com",
        job_url="https://www.linkedin.com/jobs/view/12345",
        resume=ResumeFile(filename="ada_cv.pdf", content=b"%PDF-1.4 resume", content_type="application/pdf"),
    )
