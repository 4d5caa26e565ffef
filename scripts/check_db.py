#!/usr/bin/env python3
"""
Check the database named by DATABASE_URL: connectivity and tables.
"""
import asyncio
import sys

from sqlalchemy import inspect, text

from app.database import engine, settings

EXPECTED_TABLES = ("disease_reports", "weather_alerts", "user_profiles")


async def check_connection() -> bool:
    print(f"Testing connection to: {settings.DATABASE_URL}")
    print("-" * 50)

    try:
        async with engine.connect() as conn:
            version = (await conn.execute(text("SELECT sqlite_version()"))).scalar()
            print("✅ Connection successful!")
            print(f"SQLite version: {version}")

            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
            for table in EXPECTED_TABLES:
                if table in tables:
                    print(f"✅ Table '{table}' exists")
                else:
                    print(f"⚠️  Table '{table}' does NOT exist - run run_alembic.py")
            return True
    except Exception as e:
        print(f"❌ Connection failed: {e}")
        return False
    finally:
        await engine.dispose()


if __name__ == "__main__":
    result = asyncio.run(check_connection())
    sys.exit(0 if result else 1)
