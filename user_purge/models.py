from typing import List, Optional

from pydantic import BaseModel


class UserRecord(BaseModel):
    """One entry of a Firebase Auth users export. Only localId is consumed."""
    localId: str


class UsersExport(BaseModel):
    """Top-level document of `firebase auth:export users.json --format=json`"""
    users: Optional[List[UserRecord]] = None  # missing or null means no users
