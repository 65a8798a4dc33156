import logging
import os
from typing import Iterable, List, Optional

import firebase_admin
from firebase_admin import auth, credentials

from user_purge.config import Settings

logger = logging.getLogger("user_purge.firebase")


class FirebaseInitError(RuntimeError):
    pass


def init_firebase_app(project_id: Optional[str] = None, key_path: Optional[str] = None):
    """
    Return the default Firebase Admin app, initializing it if needed.

    Default credentials are tried first (GOOGLE_APPLICATION_CREDENTIALS or the
    service account of the runtime). If that fails and a key file is configured,
    the key file is used instead.
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {"projectId": project_id} if project_id else None

    # ApplicationDefault is lazy; resolve it now so a missing ADC falls back here
    # instead of failing at the first auth call.
    try:
        cred = credentials.ApplicationDefault()
        cred.get_credential()
        return firebase_admin.initialize_app(cred, options=options)
    except Exception as e:
        logger.warning("Firebase Admin init with default credentials failed: %s", e)
        if not key_path:
            raise FirebaseInitError(
                "Firebase Admin could not be initialized with default credentials "
                "and no key file is configured (FIREBASE_KEY_PATH)"
            ) from e

    if not os.path.exists(key_path):
        raise FirebaseInitError(f"Firebase key file not found: {key_path}")

    cred = credentials.Certificate(key_path)
    app = firebase_admin.initialize_app(cred, options=options)
    logger.info("Firebase Admin initialized with key file %s", key_path)
    return app


class FirebaseAuthClient:
    """Deletes accounts from Firebase Authentication on behalf of one app."""

    def __init__(self, app=None):
        self.app = app

    def delete_user(self, uid: str) -> None:
        auth.delete_user(uid, app=self.app)


class MockAuthClient:
    """
    In-memory stand-in for FirebaseAuthClient.

    With no seeded uids every delete succeeds. When seeded, deleting a uid that
    is not (or no longer) present raises LookupError, like a real user-not-found.
    """

    def __init__(self, uids: Optional[Iterable[str]] = None):
        self._uids = set(uids) if uids is not None else None
        self.deleted: List[str] = []

    def delete_user(self, uid: str) -> None:
        if self._uids is not None:
            if uid not in self._uids:
                raise LookupError(f"No user record found for uid: {uid}")
            self._uids.discard(uid)
        self.deleted.append(uid)
        logger.debug("[MockAuth] Delete %s", uid)


def get_auth_client(settings: Settings):
    if settings.use_mock_auth:
        logger.warning("!!! USING MOCK AUTH - no accounts will be deleted !!!")
        return MockAuthClient()

    app = init_firebase_app(project_id=settings.project_id, key_path=settings.key_path)
    return FirebaseAuthClient(app)
