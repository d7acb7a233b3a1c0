from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Generator

from postaddress.core.logging import get_logger
from postaddress.domain.address import Address
from postaddress.schemas.addresses import ListOrder
from postaddress.services.models import StoredAddress
from postaddress.services.sqlite_binding import register_address_type


_logger = get_logger(__name__)

_ORDER_CLAUSES = {
    "address": "ORDER BY address, address_id",
    "insertion": "ORDER BY address_id",
}


class AddressRepository:
    """SQLite-backed address book storing canonical address text."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = Lock()
        self._ensure_schema()

    @contextmanager
    def _connect(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(self._db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        register_address_type(conn)
        try:
            yield conn
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS addresses (
                    address_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    address TEXT NOT NULL COLLATE POSTADDRESS,
                    created_at TEXT NOT NULL
                )
                """
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS ix_addresses_address ON addresses (address)"
            )
            conn.commit()

    def add(self, address: Address) -> StoredAddress:
        created_at = datetime.now(timezone.utc)
        with self._lock, self._connect() as conn:
            cursor = conn.execute(
                "INSERT INTO addresses (address, created_at) "
                "VALUES (postaddress_in(?), ?)",
                (address.text, created_at.isoformat()),
            )
            conn.commit()
            address_id = cursor.lastrowid

        _logger.info("Stored address", address_id=address_id, address=address.text)
        return StoredAddress(
            address_id=int(address_id), address=address, created_at=created_at
        )

    def get(self, address_id: int) -> StoredAddress | None:
        with self._lock, self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM addresses WHERE address_id = ?", (address_id,)
            ).fetchone()
        if row is None:
            return None
        return self._row_to_record(row)

    def list(self, order: ListOrder = "address") -> list[StoredAddress]:
        clause = _ORDER_CLAUSES[order]
        return self._select(f"SELECT * FROM addresses {clause}")

    def find_equal(self, address: Address) -> list[StoredAddress]:
        """Rows equal to ``address`` under the address collation."""

        return self._select(
            "SELECT * FROM addresses WHERE address = ? ORDER BY address_id",
            (address.text,),
        )

    def find_approx(self, address: Address) -> list[StoredAddress]:
        """Rows in the same state and suburb as ``address``."""

        return self._select(
            "SELECT * FROM addresses WHERE postaddress_ti(address, ?) "
            "ORDER BY address, address_id",
            (address.text,),
        )

    def find_by_postcode(self, postcode: str) -> list[StoredAddress]:
        return self._select(
            "SELECT * FROM addresses WHERE show_postcode(address) = ? "
            "ORDER BY address, address_id",
            (postcode,),
        )

    def delete(self, address_id: int) -> bool:
        with self._lock, self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM addresses WHERE address_id = ?", (address_id,)
            )
            conn.commit()
        deleted = cursor.rowcount > 0
        if deleted:
            _logger.info("Deleted address", address_id=address_id)
        return deleted

    def _select(self, query: str, params: tuple = ()) -> list[StoredAddress]:
        with self._lock, self._connect() as conn:
            rows = conn.execute(query, params).fetchall()
        return [self._row_to_record(row) for row in rows]

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> StoredAddress:
        return StoredAddress(
            address_id=row["address_id"],
            address=Address.trusted(row["address"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )
