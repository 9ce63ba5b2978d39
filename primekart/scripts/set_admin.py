"""
Promote a user to admin.

Registration always creates ``user`` accounts, so this is how the first
admin is made.

Usage:
    primekart-set-admin <email>
    primekart-set-admin --list
"""

import argparse
import sys
from typing import List, Optional

from pymongo.database import Database

from primekart.config import get_settings
from primekart.database.mongo import create_client, get_database
from primekart.repositories.user import UserRepository


def set_admin_by_email(db: Database, email: str) -> bool:
    """Set user as admin by email."""
    return UserRepository(db).set_role(email, "admin")


def list_users(db: Database) -> None:
    """List all users with their roles."""
    print("\nCurrent users:")
    print("-" * 60)
    for user in UserRepository(db).list_all():
        role_badge = "ADMIN" if user.role == "admin" else "user "
        print(f"  {role_badge} | {user.email} | {user.name}")
    print("-" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Set a user as admin in PrimeKart")
    parser.add_argument(
        "email",
        nargs="?",
        help="Email address of the user to make admin",
    )
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="List all users and their roles",
    )
    args = parser.parse_args(argv)

    if not args.list and not args.email:
        parser.print_help()
        print("\nError: Please provide an email or --list")
        return 1

    settings = get_settings()
    client = create_client(settings)
    try:
        db = get_database(client, settings)

        if args.list:
            list_users(db)
            return 0

        if not set_admin_by_email(db, args.email):
            print(f"User not found: {args.email}")
            print("   Make sure the user has registered first.")
            return 1

        print(f"Set {args.email} as admin. Existing tokens keep their old role until re-login.")
        list_users(db)
        return 0
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
