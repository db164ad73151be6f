"""Webhooks the trigger source calls on Firestore/RTDB changes."""
from fastapi import APIRouter, Depends

from app.constants import MESSAGE_CREATED_TRIGGER, PRESENCE_UPDATED_TRIGGER
from app.schemas import MessageCreatedEvent, NotificationOut, PresenceUpdatedEvent
from app.security import verify_trigger_secret
from app.services.notification_service import send_chat_notification
from app.services.presence_service import PresenceUpdateResult, propagate_presence

router = APIRouter(
    prefix="/triggers",
    tags=["triggers"],
    dependencies=[Depends(verify_trigger_secret)],
)


@router.post(
    "/message-created",
    response_model=NotificationOut,
    summary=f"Document created at {MESSAGE_CREATED_TRIGGER}",
)
async def on_message_created(event: MessageCreatedEvent):
    """Never fails on dispatch errors, malformed messages included."""
    message_id = await send_chat_notification(room_id=event.params.room_id, message=event.data)
    return NotificationOut(sent=message_id is not None, message_id=message_id)


@router.post(
    "/presence-updated",
    response_model=PresenceUpdateResult,
    summary=f"Value updated at {PRESENCE_UPDATED_TRIGGER}",
)
async def on_presence_updated(event: PresenceUpdatedEvent):
    """Commit failures surface as 500 so the source can retry."""
    return await propagate_presence(user_id=event.params.user_id, after=event.after)
