"""Create the PMS collection indexes.

Run with:

    python -m scripts.ensure_indexes [--uri <mongo-uri>] [--db <name>]

Defaults come from the MONGO_URI/MONGO_DB_NAME environment variables.
"""

from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv
from pymongo.errors import PyMongoError


def get_database(uri: str | None, db_name: str | None):
    from pms.config import reload_config
    from pms.db import connect_database  # Lazy import to ensure env is loaded

    reload_config()
    return connect_database(uri, db_name)


def ensure_indexes(uri: str | None = None, db_name: str | None = None) -> int:
    try:
        db = get_database(uri, db_name)
    except PyMongoError as exc:
        print(f"Could not connect to MongoDB: {exc}", file=sys.stderr)
        return 1

    try:
        if not db.ensure_indexes():
            print("Unique email index was not created; remove duplicate user emails first", file=sys.stderr)
            return 1
    finally:
        db.close()

    print("Indexes ensured")
    return 0


def main() -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Create the PMS collection indexes")
    parser.add_argument("--uri", default=None, help="MongoDB connection string")
    parser.add_argument("--db", default=None, help="Database name")
    args = parser.parse_args()

    return ensure_indexes(args.uri, args.db)


if __name__ == "__main__":
    raise SystemExit(main())
