from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


# -------------------- Trigger Event Schemas --------------------


class MessageCreatedParams(BaseModel):
    """Path parameters of `chatRooms/{roomId}/messages/{messageId}`."""
    room_id: str = Field(alias="roomId")
    message_id: Optional[str] = Field(None, alias="messageId")

    class Config:
        populate_by_name = True


class MessageCreatedEvent(BaseModel):
    """Document-created event: the new message snapshot plus its path parameters.

    `data` stays a plain dict; the dispatcher parses it and swallows malformed messages.
    """
    params: MessageCreatedParams
    data: Dict[str, Any]


class PresenceParams(BaseModel):
    """Path parameters of `/userStatus/{userId}`."""
    user_id: str = Field(alias="userId")

    class Config:
        populate_by_name = True


class PresenceUpdatedEvent(BaseModel):
    """Value-updated event: before/after values of the presence record."""
    params: PresenceParams
    before: Optional[Dict[str, Any]] = None
    after: Optional[Dict[str, Any]] = None


class NotificationOut(BaseModel):
    sent: bool
    message_id: Optional[str] = None
