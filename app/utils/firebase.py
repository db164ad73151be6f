import asyncio

from firebase_admin import messaging

from app.database import init_firebase
from app.models import PushPayload
from app.utils.logger import get_logger

logger = get_logger("fcm")


def build_fcm_message(token: str, payload: PushPayload) -> messaging.Message:
    """Map the client payload contract onto an FCM HTTP v1 message.

    `sound` and `click_action` have no top-level slot in v1, so they travel
    in the Android and APNs blocks.
    """
    note = payload.notification
    return messaging.Message(
        token=token,
        notification=messaging.Notification(title=note.title, body=note.body),
        data=payload.data.model_dump(by_alias=True),
        android=messaging.AndroidConfig(
            notification=messaging.AndroidNotification(
                sound=note.sound,
                click_action=payload.data.click_action,
            ),
        ),
        apns=messaging.APNSConfig(
            payload=messaging.APNSPayload(aps=messaging.Aps(sound=note.sound)),
        ),
    )


async def send_push_message(token: str, payload: PushPayload) -> str:
    """Send a single FCM message and return the message id FCM assigned."""
    message = build_fcm_message(token, payload)
    app = init_firebase()
    response = await asyncio.to_thread(messaging.send, message, False, app)
    logger.info(f"[FCM] Sent: {response}")
    return response
