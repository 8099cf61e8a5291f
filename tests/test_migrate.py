import sqlite3

from resalehub.db.dal import Database
from resalehub.db.migrate import (
    CURRENT_SCHEMA_VERSION,
    SCHEMA_VERSION_KEY,
    apply_migrations,
)

LEGACY_CUSTOMERS_DDL = """
CREATE TABLE customers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT,
    phone TEXT,
    platform TEXT NOT NULL,
    notes TEXT,
    total_purchases INTEGER NOT NULL DEFAULT 0,
    last_purchase TEXT,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ','now')),
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ','now'))
);
"""


def _columns(db_path, table):
    conn = sqlite3.connect(db_path)
    try:
        return [row[1] for row in conn.execute(f"PRAGMA table_info({table})")]
    finally:
        conn.close()


def _legacy_db(db_path):
    conn = sqlite3.connect(db_path)
    try:
        conn.execute(LEGACY_CUSTOMERS_DDL)
        conn.execute(
            "INSERT INTO customers (name, email, platform) VALUES (?, ?, ?)",
            ("Ada Buyer", "ada@example.com", "Vinted"),
        )
        conn.commit()
    finally:
        conn.close()


def test_fresh_database_is_at_current_version(tmp_path):
    db_path = tmp_path / "fresh.sqlite3"
    assert apply_migrations(db_path) == CURRENT_SCHEMA_VERSION
    assert "image" in _columns(db_path, "customers")
    assert Database(db_path).get_metadata(SCHEMA_VERSION_KEY) == "2"


def test_legacy_customers_table_gains_image_column(tmp_path):
    db_path = tmp_path / "legacy.sqlite3"
    _legacy_db(db_path)
    assert "image" not in _columns(db_path, "customers")

    assert apply_migrations(db_path) == 2

    assert "image" in _columns(db_path, "customers")
    db = Database(db_path)
    assert db.get_metadata(SCHEMA_VERSION_KEY) == "2"
    customers = db.list_customers()
    assert len(customers) == 1
    assert customers[0]["name"] == "Ada Buyer"
    assert customers[0]["email"] == "ada@example.com"
    assert customers[0]["image"] is None


def test_migrations_are_idempotent(tmp_path):
    db_path = tmp_path / "legacy.sqlite3"
    _legacy_db(db_path)
    apply_migrations(db_path)
    assert apply_migrations(db_path) == 2
    assert _columns(db_path, "customers").count("image") == 1
    assert len(Database(db_path).list_customers()) == 1
