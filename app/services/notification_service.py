"""
Chat notification dispatch: one FCM push per newly created chat message.

Delivery is best-effort. Missing receiver, room or token is an expected no-op,
and any failure while looking things up or sending is logged and swallowed.
"""
from typing import Optional

from app.constants import (
    CHAT_ROOMS_COLLECTION,
    NOTIFICATION_CLICK_ACTION,
    USER_TOKENS_COLLECTION,
)
from app.database import get_firestore
from app.models import ChatMessage, ChatRoom, PushData, PushNotification, PushPayload, UserToken
from app.utils.chat_helpers import (
    format_notification_body,
    resolve_sender_name,
    resolve_sender_role,
    truncate_body,
)
from app.utils.firebase import send_push_message
from app.utils.logger import get_logger

logger = get_logger("chat_notification")


def build_chat_payload(*, room_id: str, room: ChatRoom, message: ChatMessage) -> PushPayload:
    """Assemble the push payload for `message` sent inside `room`.

    Raises ValueError when the message lacks a field the payload cannot do without.
    """
    if message.type is None or message.sender_id is None:
        raise ValueError("message has no type or senderId")
    body = format_notification_body(message)
    if body is None:
        raise ValueError("text message has no content")

    role = resolve_sender_role(room, message)
    return PushPayload(
        notification=PushNotification(title=resolve_sender_name(room, role), body=truncate_body(body)),
        data=PushData(
            chat_room_id=room_id,
            click_action=NOTIFICATION_CLICK_ACTION,
            message_type=message.type,
            sender_id=message.sender_id,
        ),
    )


async def send_chat_notification(*, room_id: str, message: ChatMessage | dict) -> Optional[str]:
    """Notify the receiver of a new chat message. Returns the FCM message id, or None when nothing was sent."""
    try:
        if isinstance(message, dict):
            message = ChatMessage.model_validate(message)

        if not message.receiver_id:
            logger.info(f"No receiver ID found in message (room={room_id})")
            return None

        db = get_firestore()

        room_snapshot = await db.collection(CHAT_ROOMS_COLLECTION).document(room_id).get()
        if not room_snapshot.exists:
            logger.info(f"Chat room not found: {room_id}")
            return None
        room = ChatRoom.model_validate({**room_snapshot.to_dict(), "id": room_snapshot.id})

        token_snapshot = await db.collection(USER_TOKENS_COLLECTION).document(message.receiver_id).get()
        token_doc = (
            UserToken.model_validate({**(token_snapshot.to_dict() or {}), "user_id": token_snapshot.id})
            if token_snapshot.exists
            else None
        )
        if not token_doc or not token_doc.token:
            logger.info(f"No token found for user: {message.receiver_id}")
            return None

        payload = build_chat_payload(room_id=room_id, room=room, message=message)
        response = await send_push_message(token_doc.token, payload)
        logger.info(f"Notification sent successfully: room={room_id} receiver={message.receiver_id} id={response}")
        return response
    except Exception as e:
        logger.error(f"Error sending notification for room {room_id}: {e}", exc_info=True)
        return None
