from pydantic import BaseModel, Field
from typing import Optional


class PresenceStatus(BaseModel):
    """Value stored at `/userStatus/{userId}` in the Realtime Database."""
    is_online: Optional[bool] = Field(None, alias="isOnline")

    class Config:
        populate_by_name = True
        extra = "ignore"
