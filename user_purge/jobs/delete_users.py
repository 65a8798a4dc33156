#!/usr/bin/env python3
"""
Delete every Firebase Auth account listed in a users export.

The export is the JSON written by `firebase auth:export users.json --format=json`;
only each record's `localId` is used.

Usage:
    # Delete the accounts listed in ./users.json
    python -m user_purge.jobs.delete_users

    # Another file, explicit project and key file fallback
    python -m user_purge.jobs.delete_users exports/users.json --project my-project --key-path key.json

    # Walk the file against the in-memory mock client (nothing is deleted)
    python -m user_purge.jobs.delete_users --mock

Deletions run sequentially and stop at the first failure. Exit status is 0 when
every listed account was deleted, 1 otherwise.

WARNING: This is a destructive operation. Deleted accounts cannot be restored.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from user_purge.config import Settings, load_settings
from user_purge.firebase import get_auth_client
from user_purge.services.deletion import delete_users
from user_purge.services.users_file import load_users

logger = logging.getLogger("user_purge.jobs.delete_users")


def run(settings: Settings, auth_client=None) -> int:
    users = load_users(settings.users_file)
    logger.info("Found %d users in %s", len(users), settings.users_file)

    if auth_client is None:
        auth_client = get_auth_client(settings)

    return delete_users(users, auth_client)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Delete Firebase Auth accounts listed in a users export")
    parser.add_argument("users_file", nargs="?", default=None, help="Path to the users export (default: $USERS_FILE or users.json)")
    parser.add_argument("--project", default=None, help="Firebase / GCP project id")
    parser.add_argument("--key-path", default=None, help="Service account key file, used if default credentials fail")
    parser.add_argument("--mock", action="store_true", help="Use the in-memory mock auth client instead of Firebase")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValidationError:
        logging.basicConfig(level="INFO")
        logger.exception("Invalid configuration; no users were deleted")
        return 1

    overrides = {}
    if args.users_file:
        overrides["users_file"] = args.users_file
    if args.project:
        overrides["project_id"] = args.project
    if args.key_path:
        overrides["key_path"] = args.key_path
    if args.mock:
        overrides["use_mock_auth"] = True
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    settings = settings.model_copy(update=overrides)

    logging.basicConfig(level=settings.log_level)

    try:
        run(settings)
    except Exception:
        logger.exception("User deletion aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
