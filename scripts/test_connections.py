#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify all database connections are working and the
schema / indexes can be created.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from aether.db import postgres, mongodb
from aether.core.config import get_settings


def main():
    settings = get_settings()
    print("=" * 50)
    print("AETHER - CONNECTION TEST")
    print("=" * 50)

    # Test PostgreSQL
    print("\n[1] Testing PostgreSQL...")
    print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")
    postgres_ok = postgres.test_postgres_connection()
    if postgres_ok:
        print("    ✅ PostgreSQL: CONNECTED")
    else:
        print("    ❌ PostgreSQL: FAILED")

    # Test MongoDB
    print("\n[2] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    mongo_ok = mongodb.test_mongo_connection()
    if mongo_ok:
        print("    ✅ MongoDB: CONNECTED")
    else:
        print("    ❌ MongoDB: FAILED")

    # Schema + indexes (only if connected)
    print("\n[3] Creating schema and indexes...")
    if postgres_ok:
        postgres.init_postgres_schema()
        print("    ✅ PostgreSQL tables: users, interests")
    else:
        print("    ⚠️  Skipping PostgreSQL schema (not connected)")
    if mongo_ok:
        mongodb.init_mongo_indexes()
        print("    ✅ MongoDB index: quiz_results.user_id (unique)")
    else:
        print("    ⚠️  Skipping MongoDB indexes (not connected)")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
