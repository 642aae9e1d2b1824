"""
Database initialization script.

Run this script to create the database tables without Alembic.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.logging_config import configure_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    configure_logging()
    print("=" * 50)
    print("Workload Monitor Database Initialization")
    print("=" * 50)

    try:
        init_db()
    except Exception as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)

    print("SUCCESS: Database initialized!")
