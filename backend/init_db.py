"""
Tiny DB bootstrap script for the tax tracker.

- Reads TAX_TRACKER_DB_URL (or falls back to tax_tracker.db beside this file).
- Creates both tables and the blank business profile if they are missing.

Usage (from backend/):
  python init_db.py
"""

from taxbook.config import load_settings
from taxbook.store import LedgerStore


def main() -> None:
    settings = load_settings()
    LedgerStore(settings.db_url).initialize()
    print(f"Tax tracker tables ready at {settings.db_url}")


if __name__ == "__main__":
    main()
