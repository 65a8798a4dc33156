import logging
from unittest.mock import MagicMock, call

import pytest

from user_purge.models import UserRecord
from user_purge.services.deletion import delete_users


def _users(*uids):
    return [UserRecord(localId=uid) for uid in uids]


def _messages(caplog):
    return [r.getMessage() for r in caplog.records if r.name == "user_purge.deletion"]


def test_delete_users_in_order(mock_auth, info_logs):
    deleted = delete_users(_users("a1", "a2"), mock_auth)

    assert deleted == 2
    assert mock_auth.deleted == ["a1", "a2"]
    assert _messages(info_logs) == ["Deleted: a1", "Deleted: a2", "✅ All users deleted"]


def test_delete_users_empty_still_logs_completion(info_logs):
    client = MagicMock()

    assert delete_users([], client) == 0

    client.delete_user.assert_not_called()
    assert _messages(info_logs) == ["✅ All users deleted"]


def test_delete_users_stops_at_first_failure(info_logs):
    client = MagicMock()
    client.delete_user.side_effect = [None, RuntimeError("permission denied"), None, None]

    with pytest.raises(RuntimeError, match="permission denied"):
        delete_users(_users("u1", "u2", "u3", "u4"), client)

    assert client.delete_user.call_args_list == [call("u1"), call("u2")]

    messages = _messages(info_logs)
    assert messages[0] == "Deleted: u1"
    assert "Deleted: u2" not in messages
    assert "✅ All users deleted" not in messages
    error = [r for r in info_logs.records if r.levelno == logging.ERROR]
    assert len(error) == 1
    assert "u2" in error[0].getMessage()
    assert "after 1 deleted" in error[0].getMessage()


def test_delete_users_first_record_fails(info_logs):
    client = MagicMock()
    client.delete_user.side_effect = LookupError("no user")

    with pytest.raises(LookupError):
        delete_users(_users("x", "y"), client)

    client.delete_user.assert_called_once_with("x")
    assert not [m for m in _messages(info_logs) if m.startswith("Deleted:")]


def test_delete_users_already_deleted_is_a_failure():
    from user_purge.firebase import MockAuthClient

    client = MockAuthClient(uids=["a1", "a2"])

    with pytest.raises(LookupError):
        delete_users(_users("a1", "a1", "a2"), client)

    assert client.deleted == ["a1"]
