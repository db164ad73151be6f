# Re-export document models
from .chat import ChatRoom, ChatMessage
from .notification import UserToken, PushNotification, PushData, PushPayload
from .presence import PresenceStatus
