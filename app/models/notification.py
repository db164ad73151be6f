from pydantic import BaseModel, Field
from typing import Optional

from app.constants import NOTIFICATION_SOUND


class UserToken(BaseModel):
    """FCM token document; the Firestore document id is the user id."""
    user_id: Optional[str] = None
    token: Optional[str] = None

    class Config:
        extra = "ignore"


class PushNotification(BaseModel):
    title: Optional[str] = None
    body: str
    sound: str = NOTIFICATION_SOUND


class PushData(BaseModel):
    """Data block read by the mobile client to open the right room."""
    chat_room_id: str = Field(alias="chatRoomId")
    click_action: str
    message_type: str = Field(alias="messageType")
    sender_id: str = Field(alias="senderId")

    class Config:
        populate_by_name = True


class PushPayload(BaseModel):
    """Wire contract toward the mobile client: {notification: {...}, data: {...}}."""
    notification: PushNotification
    data: PushData
