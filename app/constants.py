from enum import Enum


class Role(str, Enum):
    """Participant roles inside a chat room."""
    DOCTOR = "doctor"
    PATIENT = "patient"


class MessageType(str, Enum):
    """Message kinds the client writes into `chatRooms/{roomId}/messages`."""
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    DOCUMENT = "document"


# Firestore collections (schema-in-code)
CHAT_ROOMS_COLLECTION = "chatRooms"
MESSAGES_SUBCOLLECTION = "messages"
USER_TOKENS_COLLECTION = "userTokens"

# Realtime Database presence path: /userStatus/{userId}
USER_STATUS_PATH = "userStatus"

# Push notification
NOTIFICATION_CLICK_ACTION = "FLUTTER_NOTIFICATION_CLICK"
NOTIFICATION_SOUND = "default"
NOTIFICATION_BODY_MAX_LENGTH = 100
NOTIFICATION_ELLIPSIS = "..."

# Trigger sources the webhooks stand in for
MESSAGE_CREATED_TRIGGER = f"{CHAT_ROOMS_COLLECTION}/{{roomId}}/{MESSAGES_SUBCOLLECTION}/{{messageId}}"
PRESENCE_UPDATED_TRIGGER = f"/{USER_STATUS_PATH}/{{userId}}"
