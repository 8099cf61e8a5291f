"""Database schema DDL definitions and initialization utilities.

Tables:
  - customers: buyer/seller contacts captured by the intake form
  - items: inventory listings; prices stored in the current display currency
  - metadata: key/value store (display settings, schema version)
"""

from __future__ import annotations
import sqlite3
from typing import Sequence
from pathlib import Path

BASIC_UTC_NOW = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"

CUSTOMERS_DDL = f"""
CREATE TABLE IF NOT EXISTS customers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT,
    phone TEXT,
    platform TEXT NOT NULL, -- 'eBay' | 'Vinted' | 'Instagram' | ...
    notes TEXT,
    image TEXT, -- data URL
    total_purchases INTEGER NOT NULL DEFAULT 0,
    last_purchase TEXT, -- ISO timestamp
    created_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW}),
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

ITEMS_DDL = f"""
CREATE TABLE IF NOT EXISTS items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    brand TEXT NOT NULL DEFAULT '',
    category TEXT NOT NULL DEFAULT '',
    purchase_price REAL NOT NULL DEFAULT 0,
    listing_price REAL,
    notes TEXT,
    created_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW}),
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

METADATA_DDL = f"""
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

CUSTOMERS_PLATFORM_INDEX_DDL = (
    "CREATE INDEX IF NOT EXISTS idx_customers_platform ON customers(platform);"
)
ITEMS_CATEGORY_INDEX_DDL = (
    "CREATE INDEX IF NOT EXISTS idx_items_category ON items(category);"
)

DDL_ORDER: Sequence[str] = (
    CUSTOMERS_DDL,
    ITEMS_DDL,
    METADATA_DDL,
)


def init_db(path: Path) -> None:
    """Create all tables idempotently.

    Parameters
    ----------
    path: Path to SQLite database file.
    """
    conn = sqlite3.connect(path)
    try:
        cur = conn.cursor()
        for ddl in DDL_ORDER:
            cur.execute(ddl)
        for ddl in (CUSTOMERS_PLATFORM_INDEX_DDL, ITEMS_CATEGORY_INDEX_DDL):
            cur.execute(ddl)
        conn.commit()
    finally:
        conn.close()
