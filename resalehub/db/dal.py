"""Data Access Layer utilities.

Responsibilities
----------------
- CRUD helpers for customers and inventory items.
- Key/value access to the metadata table (display settings).
- Bulk price rewrite used when the display currency changes.
"""

from __future__ import annotations

from pathlib import Path
import sqlite3
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from resalehub.models import CustomerIn, ItemIn

UTC_NOW_SQL = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"

_UPSERT_METADATA_SQL = f"""
INSERT INTO metadata (key, value)
VALUES (?, ?)
ON CONFLICT(key) DO UPDATE SET
    value = excluded.value,
    updated_at = ({UTC_NOW_SQL})
"""


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path

    # ------------------------------------------------------------------
    # Connection helpers
    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    # ------------------------------------------------------------------
    # Metadata
    def get_metadata(self, key: str) -> Optional[str]:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT value FROM metadata WHERE key = ?", (key,))
            row = cur.fetchone()
            return row[0] if row else None

    def set_metadata(self, key: str, value: str) -> None:
        with self._connect() as conn:
            conn.execute(_UPSERT_METADATA_SQL, (key, value))

    # ------------------------------------------------------------------
    # Customers
    def insert_customer(self, customer: CustomerIn) -> int:
        last_purchase = (
            datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="milliseconds")
            + "Z"
        )
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                INSERT INTO customers (
                    name, email, phone, platform, notes, image,
                    total_purchases, last_purchase
                )
                VALUES (?, ?, ?, ?, ?, ?, 0, ?)
                """,
                (
                    customer.name,
                    str(customer.email) if customer.email else None,
                    customer.phone,
                    customer.platform,
                    customer.notes,
                    customer.image,
                    last_purchase,
                ),
            )
            return int(cur.lastrowid)

    def get_customer(self, customer_id: int) -> Optional[Dict[str, Any]]:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT * FROM customers WHERE id = ?", (customer_id,))
            row = cur.fetchone()
            return dict(row) if row else None

    def list_customers(self, platform: Optional[str] = None) -> List[Dict[str, Any]]:
        query = "SELECT * FROM customers"
        params: List[Any] = []
        if platform:
            query += " WHERE lower(platform) = lower(?)"
            params.append(platform)
        query += " ORDER BY created_at ASC, id ASC"
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(query, params)
            return [dict(r) for r in cur.fetchall()]

    def delete_customer(self, customer_id: int) -> bool:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("DELETE FROM customers WHERE id = ?", (customer_id,))
            return cur.rowcount > 0

    # ------------------------------------------------------------------
    # Items
    def insert_item(self, item: ItemIn, brand: str, category: str) -> int:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                INSERT INTO items (name, brand, category, purchase_price, listing_price, notes)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    item.name,
                    brand,
                    category,
                    item.purchase_price,
                    item.listing_price,
                    item.notes,
                ),
            )
            return int(cur.lastrowid)

    def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT * FROM items WHERE id = ?", (item_id,))
            row = cur.fetchone()
            return dict(row) if row else None

    def list_items(
        self, category: Optional[str] = None, brand: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        query = "SELECT * FROM items WHERE 1=1"
        params: List[Any] = []
        if category:
            query += " AND category = ?"
            params.append(category)
        if brand:
            query += " AND lower(brand) = lower(?)"
            params.append(brand)
        query += " ORDER BY created_at ASC, id ASC"
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(query, params)
            return [dict(r) for r in cur.fetchall()]

    def delete_item(self, item_id: int) -> bool:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("DELETE FROM items WHERE id = ?", (item_id,))
            return cur.rowcount > 0

    def rewrite_item_prices(self, convert: Callable[[float], float]) -> int:
        """Apply `convert` to every stored price in a single transaction.

        Returns the number of items touched.
        """
        with self._connect() as conn:
            return _rewrite_prices(conn.cursor(), convert)

    def switch_display_currency(
        self,
        new_currency: str,
        *,
        currency_key: str,
        previous_key: str,
        fallback: str,
        supported: Tuple[str, ...],
        convert: Callable[[float, str, str], float],
    ) -> Tuple[str, int]:
        """Record `new_currency` and rewrite stored prices into it atomically.

        The current currency is read, both metadata keys are written and every
        item price is converted inside one `BEGIN IMMEDIATE` transaction, so a
        failure anywhere leaves settings and prices untouched.

        Returns ``(previous_currency, converted_items)``.
        """
        conn = self._connect()
        conn.isolation_level = None
        try:
            cur = conn.cursor()
            cur.execute("BEGIN IMMEDIATE")
            cur.execute("SELECT value FROM metadata WHERE key = ?", (currency_key,))
            row = cur.fetchone()
            previous = row[0] if row and row[0] in supported else fallback
            for key, value in ((previous_key, previous), (currency_key, new_currency)):
                cur.execute(_UPSERT_METADATA_SQL, (key, value))
            converted = 0
            if previous != new_currency:
                converted = _rewrite_prices(
                    cur, lambda amount: convert(amount, previous, new_currency)
                )
            cur.execute("COMMIT")
        except Exception:
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            raise
        finally:
            conn.close()
        return previous, converted


def _rewrite_prices(cur: sqlite3.Cursor, convert: Callable[[float], float]) -> int:
    cur.execute("SELECT id, purchase_price, listing_price FROM items")
    rows = cur.fetchall()
    for row in rows:
        listing = row["listing_price"]
        cur.execute(
            f"""
            UPDATE items
            SET purchase_price = ?, listing_price = ?, updated_at = ({UTC_NOW_SQL})
            WHERE id = ?
            """,
            (
                convert(float(row["purchase_price"])),
                convert(float(listing)) if listing is not None else None,
                row["id"],
            ),
        )
    return len(rows)
