import os
from typing import Literal, Optional

from pydantic import BaseModel, field_validator


DEFAULT_USERS_FILE = "users.json"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    """Runtime settings for the purge job, read from the environment."""
    users_file: str = DEFAULT_USERS_FILE
    project_id: Optional[str] = None
    key_path: Optional[str] = None  # service account key, used when default credentials fail
    use_mock_auth: bool = False
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings(environ=None) -> Settings:
    env = os.environ if environ is None else environ

    project_id = env.get("GOOGLE_CLOUD_PROJECT") or env.get("GCP_PROJECT")

    return Settings(
        users_file=env.get("USERS_FILE") or DEFAULT_USERS_FILE,
        project_id=project_id or None,
        key_path=env.get("FIREBASE_KEY_PATH") or None,
        use_mock_auth=env.get("USE_MOCK_AUTH", "0") == "1",
        log_level=env.get("LOG_LEVEL") or "INFO",
    )
