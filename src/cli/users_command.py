"""Users command wiring for recordsieve CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import ANY_CHOICE
from core.types import User
from filtering.criteria import UserCriteria
from filtering.engine import filter_records
from records.record_file import load_users
from records.samples import sample_users

_ACTIVE_CHOICES = {"true": True, "false": False, ANY_CHOICE: None}


def add_users_command(subparsers: Any) -> None:
    """Register users subcommand."""
    parser = subparsers.add_parser("users", help="List users by active flag")
    parser.add_argument(
        "--active",
        choices=tuple(_ACTIVE_CHOICES),
        default="true",
        help="Active flag to match, or 'any'",
    )
    parser.add_argument("--records", help="Optional YAML user file; built-in sample if omitted")


def run_users_command(args: argparse.Namespace) -> int:
    """Print users matching the requested active flag."""
    criteria = UserCriteria(active=_ACTIVE_CHOICES[args.active])
    users = load_users(args.records) if args.records else sample_users()
    for user in filter_records(users, criteria):
        print(format_user(user))
    return 0


def format_user(user: User) -> str:
    return f"Id : {user.user_id} | Name : {user.name}"
