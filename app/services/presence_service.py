"""
Presence propagation: copy a user's online status onto every chat room
that references them, as doctor or as patient, in a single batched write.
"""
import asyncio
from typing import Optional

from google.cloud.firestore import SERVER_TIMESTAMP
from google.cloud.firestore_v1.base_query import FieldFilter
from pydantic import BaseModel

from app.constants import CHAT_ROOMS_COLLECTION
from app.database import get_firestore
from app.models import PresenceStatus
from app.utils.logger import get_logger

logger = get_logger("presence")


class PresenceUpdateResult(BaseModel):
    doctor_rooms: int = 0
    patient_rooms: int = 0


async def propagate_presence(*, user_id: str, after: Optional[dict]) -> PresenceUpdateResult:
    """Apply the new presence value of `user_id` to their chat rooms.

    An empty `after` value is a no-op. Commit errors are not caught; the
    trigger source decides whether to retry.
    """
    if not after:
        logger.debug(f"Empty presence value for user {user_id}; skipping")
        return PresenceUpdateResult()

    status = PresenceStatus.model_validate(after)
    db = get_firestore()
    rooms = db.collection(CHAT_ROOMS_COLLECTION)

    doctor_rooms, patient_rooms = await asyncio.gather(
        rooms.where(filter=FieldFilter("doctorId", "==", user_id)).get(),
        rooms.where(filter=FieldFilter("patientId", "==", user_id)).get(),
    )

    batch = db.batch()
    # A room matching both queries gets both updates
    for doc in doctor_rooms:
        batch.update(doc.reference, {
            "isDoctorOnline": status.is_online,
            "doctorLastSeen": SERVER_TIMESTAMP,
        })
    for doc in patient_rooms:
        batch.update(doc.reference, {
            "isPatientOnline": status.is_online,
            "patientLastSeen": SERVER_TIMESTAMP,
        })

    await batch.commit()

    logger.info(
        f"Presence for {user_id} (online={status.is_online}) applied to "
        f"{len(doctor_rooms)} doctor room(s) and {len(patient_rooms)} patient room(s)"
    )
    return PresenceUpdateResult(doctor_rooms=len(doctor_rooms), patient_rooms=len(patient_rooms))
