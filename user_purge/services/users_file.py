import json
import logging
from typing import List

from pydantic import ValidationError

from user_purge.models import UserRecord, UsersExport

logger = logging.getLogger("user_purge.users_file")


class UsersFileError(ValueError):
    pass


def load_users(path: str) -> List[UserRecord]:
    """
    Read a users export and return its records in file order.

    The whole document is parsed and validated before anything is returned,
    so a bad file never leads to a partial run.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise UsersFileError(f"Users file not found: {path}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise UsersFileError(f"Users file is not valid UTF-8 JSON: {path}: {e}") from e

    if not isinstance(data, dict):
        raise UsersFileError(
            f"Users file must contain a JSON object, got {type(data).__name__}: {path}"
        )

    try:
        export = UsersExport.model_validate(data)
    except ValidationError as e:
        raise UsersFileError(f"Invalid users file {path}: {e}") from e

    users = export.users or []
    logger.debug("Loaded %d users from %s", len(users), path)
    return users
