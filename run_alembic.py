#!/usr/bin/env python3
"""
Run Alembic migrations using Python
"""
import os
import sys

from alembic.config import Config
from alembic import command

ROOT = os.path.dirname(os.path.abspath(__file__))

# Configure Alembic
alembic_cfg = Config(os.path.join(ROOT, "alembic.ini"))
alembic_cfg.set_main_option("script_location", os.path.join(ROOT, "migrations"))

try:
    print("Running Alembic migrations...")
    command.upgrade(alembic_cfg, "head")
    print("✅ Migrations completed successfully!")
except Exception as e:
    error_msg = str(e).lower()
    print(f"❌ Migration failed: {e}")

    if "unable to open database file" in error_msg or "readonly database" in error_msg:
        print("\n⚠️  DATABASE FILE ERROR!")
        print("Check that the directory in DATABASE_URL exists and is writable.")
        sys.exit(1)

    raise
