import firebase_admin
from firebase_admin import credentials, firestore_async

from app.config import get_settings
from app.utils.logger import get_logger

settings = get_settings()
logger = get_logger("database")


def init_firebase() -> firebase_admin.App:
    """Initialize the default Firebase Admin app once and return it."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    if settings.FIREBASE_CREDENTIALS_FILE:
        cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS_FILE)
        app = firebase_admin.initialize_app(cred, options)
        logger.info(f"Firebase initialized from {settings.FIREBASE_CREDENTIALS_FILE}")
    else:
        # Application Default Credentials (Cloud Run / Functions runtime)
        app = firebase_admin.initialize_app(options=options)
        logger.info("Firebase initialized with application default credentials")
    return app


def get_firestore():
    """Async Firestore client bound to the default Firebase app."""
    return firestore_async.client(init_firebase())


async def ping_db() -> bool:
    """Check Firestore connectivity."""
    try:
        db = get_firestore()
        async for _ in db.collections():
            break
        return True
    except Exception as e:
        logger.warning(f"Firestore ping failed: {e}")
        return False
