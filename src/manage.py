"""Storefront database management CLI.

Creates and drops the storefront tables through a blocking driver.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys

from shared.config import get_settings
from shared.db import drop_db, setup_db


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    args = parser.parse_args()
    database_url = get_settings().sync_database_url

    if args.command == "setup-db":
        print("Creating storefront schema...")
        setup_db(database_url)
    elif args.command == "drop-db":
        if not args.yes and input("Drop every storefront table? [y/N] ").strip().lower() != "y":
            print("Aborted.")
            sys.exit(1)
        print("Dropping storefront schema...")
        drop_db(database_url)

    print("Done.")


if __name__ == "__main__":
    main()
