from pydantic import BaseModel, Field
from typing import Any, Optional


class ChatRoom(BaseModel):
    """One room per (doctor, patient) pair with denormalized names and presence."""
    id: Optional[str] = None

    doctor_id: Optional[str] = Field(None, alias="doctorId")
    patient_id: Optional[str] = Field(None, alias="patientId")
    doctor_name: Optional[str] = Field(None, alias="doctorName")
    patient_name: Optional[str] = Field(None, alias="patientName")

    # Written only by the presence propagator; not validated on read
    is_doctor_online: Any = Field(None, alias="isDoctorOnline")
    is_patient_online: Any = Field(None, alias="isPatientOnline")
    doctor_last_seen: Any = Field(None, alias="doctorLastSeen")
    patient_last_seen: Any = Field(None, alias="patientLastSeen")

    class Config:
        populate_by_name = True
        extra = "ignore"


class ChatMessage(BaseModel):
    """A message document under `chatRooms/{roomId}/messages`. Immutable once written."""
    id: Optional[str] = None
    sender_id: Optional[str] = Field(None, alias="senderId")
    receiver_id: Optional[str] = Field(None, alias="receiverId")
    type: Optional[str] = None  # text|image|audio|document
    content: Optional[str] = None
    caption: Optional[str] = None

    class Config:
        populate_by_name = True
        extra = "ignore"
