"""Review service database management CLI.

Creates and drops the review store and projection tables on SQL providers.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def _domain():
    from reviews.domain import reviews

    reviews.init()
    return reviews


def setup_database():
    from reviews.utils.db import setup_db

    print("Creating reviews database schema...")
    setup_db(_domain())
    print("Done.")


def drop_database():
    from reviews.utils.db import drop_db

    print("Dropping reviews database schema...")
    drop_db(_domain())
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Review service database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
