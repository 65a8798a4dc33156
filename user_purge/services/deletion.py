import logging
from typing import Iterable

from user_purge.models import UserRecord

logger = logging.getLogger("user_purge.deletion")


def delete_users(users: Iterable[UserRecord], auth_client) -> int:
    """
    Delete each user's auth account, one at a time, in the given order.

    Stops at the first failure: the error is re-raised and no later user is
    attempted. Returns the number of deleted accounts.
    """
    deleted = 0
    for user in users:
        try:
            auth_client.delete_user(user.localId)
        except Exception:
            logger.error(
                "Deletion failed for %s after %d deleted; remaining users were not attempted",
                user.localId,
                deleted,
            )
            raise
        deleted += 1
        logger.info("Deleted: %s", user.localId)

    logger.info("✅ All users deleted")
    return deleted
