import secrets

from fastapi import Header, HTTPException, status

from app.config import get_settings
from app.utils.logger import get_logger

logger = get_logger("security")


def verify_trigger_secret(x_trigger_secret: str | None = Header(default=None)) -> None:
    """Reject trigger calls that do not carry the configured shared secret.

    Without a configured secret every call is refused.
    """
    expected = get_settings().TRIGGER_SECRET
    if not expected:
        logger.error("TRIGGER_SECRET is not configured; refusing trigger call")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Trigger secret not configured")
    if not x_trigger_secret or not secrets.compare_digest(x_trigger_secret, expected):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid trigger secret")
