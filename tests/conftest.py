import os
import tempfile
from pathlib import Path

os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "healthchat-test-logs"))
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("TRIGGER_SECRET", "test-trigger-secret")
os.environ.setdefault("APP_DEBUG", "false")

import pytest

from app.services import notification_service, presence_service


class FakeSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocumentRef:
    def __init__(self, db, collection: str, doc_id: str):
        self._db = db
        self.collection_name = collection
        self.id = doc_id

    async def get(self):
        self._db.reads.append((self.collection_name, self.id))
        data = self._db.data.get(self.collection_name, {}).get(self.id)
        return FakeSnapshot(self, data)


class FakeQuery:
    def __init__(self, db, collection: str, field_filter):
        self._db = db
        self._collection = collection
        self._filter = field_filter

    async def get(self):
        f = self._filter
        assert f.op_string == "=="
        self._db.queries.append((self._collection, f.field_path, f.value))
        docs = self._db.data.get(self._collection, {})
        return [
            FakeSnapshot(FakeDocumentRef(self._db, self._collection, doc_id), data)
            for doc_id, data in docs.items()
            if data.get(f.field_path) == f.value
        ]


class FakeCollection:
    def __init__(self, db, name: str):
        self._db = db
        self._name = name

    def document(self, doc_id: str) -> FakeDocumentRef:
        return FakeDocumentRef(self._db, self._name, doc_id)

    def where(self, *, filter):
        return FakeQuery(self._db, self._name, filter)


class FakeBatch:
    def __init__(self, db):
        self._db = db
        self.updates = []
        self.committed = False

    def update(self, reference, data):
        self.updates.append((reference.collection_name, reference.id, dict(data)))

    async def commit(self):
        if self._db.commit_error:
            raise self._db.commit_error
        for collection, doc_id, data in self.updates:
            self._db.data[collection][doc_id].update(data)
        self.committed = True
        return []


class FakeFirestore:
    """In-memory stand-in for the async Firestore client."""

    def __init__(self):
        self.data: dict[str, dict[str, dict]] = {}
        self.reads = []
        self.queries = []
        self.batches: list[FakeBatch] = []
        self.commit_error: Exception | None = None
        self.read_error: Exception | None = None

    def collection(self, name: str) -> FakeCollection:
        if self.read_error:
            raise self.read_error
        return FakeCollection(self, name)

    def batch(self) -> FakeBatch:
        batch = FakeBatch(self)
        self.batches.append(batch)
        return batch

    def add(self, collection: str, doc_id: str, data: dict) -> None:
        self.data.setdefault(collection, {})[doc_id] = dict(data)

    @property
    def touched(self) -> bool:
        return bool(self.reads or self.queries or self.batches)


class RecordingPushSender:
    def __init__(self):
        self.calls = []
        self.error: Exception | None = None

    async def __call__(self, token, payload):
        if self.error:
            raise self.error
        self.calls.append((token, payload))
        return f"projects/demo/messages/{len(self.calls)}"


@pytest.fixture
def fake_db(monkeypatch) -> FakeFirestore:
    db = FakeFirestore()
    monkeypatch.setattr(notification_service, "get_firestore", lambda: db)
    monkeypatch.setattr(presence_service, "get_firestore", lambda: db)
    return db


@pytest.fixture
def push(monkeypatch) -> RecordingPushSender:
    sender = RecordingPushSender()
    monkeypatch.setattr(notification_service, "send_push_message", sender)
    return sender


@pytest.fixture
def room(fake_db):
    fake_db.add("chatRooms", "room-1", {
        "doctorId": "doc-1",
        "patientId": "pat-1",
        "doctorName": "Dr. Lee",
        "patientName": "Sam Patel",
        "isDoctorOnline": False,
        "isPatientOnline": False,
    })
    fake_db.add("userTokens", "pat-1", {"token": "patient-device-token"})
    fake_db.add("userTokens", "doc-1", {"token": "doctor-device-token"})
    return fake_db.data["chatRooms"]["room-1"]
