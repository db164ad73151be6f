import pytest

from app.constants import Role
from app.models import ChatMessage, ChatRoom
from app.utils.chat_helpers import (
    format_notification_body,
    resolve_sender_name,
    resolve_sender_role,
    truncate_body,
)


ROOM = ChatRoom(doctorId="doc-1", patientId="pat-1", doctorName="Dr. Lee", patientName="Sam Patel")


def msg(**fields) -> ChatMessage:
    return ChatMessage.model_validate(fields)


@pytest.mark.parametrize(
    "fields, expected",
    [
        ({"type": "text", "content": "hello there"}, "hello there"),
        ({"type": "text"}, None),
        ({"type": "text", "content": ""}, ""),
        ({"type": "document"}, "Sent you a document: "),
        ({"type": "image", "caption": "cat"}, "Photo: cat"),
        ({"type": "image"}, "Sent you a photo"),
        ({"type": "image", "caption": ""}, "Sent you a photo"),
        ({"type": "audio", "content": "gs://bucket/a.m4a"}, "Sent you a voice message"),
        ({"type": "document", "content": "lab-results.pdf"}, "Sent you a document: lab-results.pdf"),
        ({"type": "video", "content": "x"}, "New message"),
        ({"content": "no type"}, "New message"),
    ],
)
def test_format_notification_body(fields, expected):
    assert format_notification_body(msg(**fields)) == expected


def test_truncate_long_body():
    body = truncate_body("a" * 150)
    assert len(body) == 100
    assert body.endswith("...")
    assert body[:97] == "a" * 97


@pytest.mark.parametrize("length", [0, 50, 97, 100])
def test_truncate_keeps_short_body(length):
    assert truncate_body("b" * length) == "b" * length


def test_truncate_just_over_limit():
    assert truncate_body("c" * 101) == "c" * 97 + "..."


def test_sender_is_doctor():
    role = resolve_sender_role(ROOM, msg(senderId="doc-1"))
    assert role == Role.DOCTOR
    assert resolve_sender_name(ROOM, role) == "Dr. Lee"


def test_any_other_sender_is_patient():
    role = resolve_sender_role(ROOM, msg(senderId="someone-else"))
    assert role == Role.PATIENT
    assert resolve_sender_name(ROOM, role) == "Sam Patel"
