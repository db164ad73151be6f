from typing import Optional

from app.constants import (
    MessageType,
    NOTIFICATION_BODY_MAX_LENGTH,
    NOTIFICATION_ELLIPSIS,
    Role,
)
from app.models import ChatMessage, ChatRoom


def resolve_sender_role(room: ChatRoom, message: ChatMessage) -> Role:
    """Doctor iff the sender matches the room's doctor; anyone else counts as the patient."""
    if message.sender_id == room.doctor_id:
        return Role.DOCTOR
    return Role.PATIENT


def resolve_sender_name(room: ChatRoom, role: Role) -> str | None:
    return room.doctor_name if role == Role.DOCTOR else room.patient_name


def format_notification_body(message: ChatMessage) -> Optional[str]:
    """Human-readable body for a message, depending on its type. None for a text message without content."""
    content = message.content or ""
    try:
        kind = MessageType(message.type)
    except ValueError:
        return "New message"

    match kind:
        case MessageType.TEXT:
            return message.content
        case MessageType.IMAGE:
            return f"Photo: {message.caption}" if message.caption else "Sent you a photo"
        case MessageType.AUDIO:
            return "Sent you a voice message"
        case MessageType.DOCUMENT:
            return f"Sent you a document: {content}"
        case _:
            return "New message"


def truncate_body(body: str, limit: int = NOTIFICATION_BODY_MAX_LENGTH) -> str:
    """Cut bodies longer than `limit` to `limit` characters including the ellipsis."""
    if len(body) > limit:
        return body[: limit - len(NOTIFICATION_ELLIPSIS)] + NOTIFICATION_ELLIPSIS
    return body
