import json
import logging

import pytest

from user_purge.firebase import MockAuthClient


@pytest.fixture
def users_file(tmp_path):
    """Write a users export and return its path."""
    def _write(data, raw=False):
        path = tmp_path / "users.json"
        path.write_text(data if raw else json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def mock_auth():
    return MockAuthClient()


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO, logger="user_purge")
    return caplog
