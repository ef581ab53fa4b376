"""
Firestore connection management via the Firebase Admin SDK.

Credentials are resolved by the SDK from GOOGLE_APPLICATION_CREDENTIALS
(or the runtime's default service account); nothing is read from disk here.
"""
import logging
from typing import Optional

import firebase_admin
from firebase_admin import firestore_async

logger = logging.getLogger(__name__)

# Firebase app and async Firestore client (initialized in init_firestore)
firebase_app: Optional[firebase_admin.App] = None
firestore_client = None


def init_firestore():
    """
    Initialize the Firebase app and async Firestore client.

    Failure is logged, not raised: the catalog repository degrades to an
    empty catalog while the client is unavailable.
    """
    global firebase_app, firestore_client

    try:
        try:
            firebase_app = firebase_admin.get_app()
        except ValueError:
            firebase_app = firebase_admin.initialize_app()
        firestore_client = firestore_async.client(firebase_app)
        logger.info("✅ Firestore client initialized")
    except Exception as e:
        firestore_client = None
        logger.error(f"❌ Failed to initialize Firestore client: {e}", exc_info=True)


def get_firestore_client():
    """Get the Firestore client, or None if initialization failed or hasn't run."""
    return firestore_client


def close_firestore():
    """Release the Firebase app."""
    global firebase_app, firestore_client
    if firebase_app is not None:
        try:
            firebase_admin.delete_app(firebase_app)
            logger.info("Firestore client closed")
        except ValueError:
            # App was already deleted elsewhere
            pass
    firebase_app = None
    firestore_client = None
