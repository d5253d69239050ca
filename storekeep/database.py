"""SQLite storage for the store and its schema."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

DEFAULT_CONNECTION_NAME = "storeAppConnection"

_KEY = "TEXT PRIMARY KEY"
_TEXT = "TEXT"
_REQUIRED_TEXT = "TEXT NOT NULL"
_MONEY = "REAL NOT NULL DEFAULT 0"
_COUNT = "INTEGER NOT NULL DEFAULT 0"


@dataclass(frozen=True)
class _ForeignKey:
    column: str
    table: str
    on_delete: Optional[str] = None

    def clause(self) -> str:
        text = f"FOREIGN KEY({self.column}) REFERENCES {self.table}(id)"
        return f"{text} ON DELETE {self.on_delete}" if self.on_delete else text


@dataclass(frozen=True)
class _Table:
    name: str
    columns: Tuple[Tuple[str, str], ...]
    foreign_keys: Tuple[_ForeignKey, ...] = field(default_factory=tuple)

    def create_statement(self) -> str:
        parts = [f"{column} {kind}" for column, kind in self.columns]
        parts.extend(key.clause() for key in self.foreign_keys)
        return f"CREATE TABLE IF NOT EXISTS {self.name} ({', '.join(parts)});"


def _contact_table(name: str) -> _Table:
    return _Table(
        name,
        (
            ("id", _KEY),
            ("name", _REQUIRED_TEXT),
            ("phone", _TEXT),
            ("address", _TEXT),
            ("note", _TEXT),
        ),
    )


_SCHEMA: Tuple[_Table, ...] = (
    _contact_table("customers"),
    _contact_table("suppliers"),
    _Table(
        "products",
        (("id", _KEY), ("name", _REQUIRED_TEXT), ("price", _MONEY), ("note", _TEXT)),
    ),
    _Table(
        "batches",
        (
            ("id", _KEY),
            ("product_id", _REQUIRED_TEXT),
            ("supplier_id", _TEXT),
            ("import_date", _TEXT),
            ("export_date", _TEXT),
            ("expired_date", _TEXT),
            ("import_price", _MONEY),
            ("export_price", _MONEY),
            ("original_quantity", _COUNT),
            ("remaining_quantity", _COUNT),
            ("note", _TEXT),
        ),
        (
            _ForeignKey("product_id", "products", "CASCADE"),
            _ForeignKey("supplier_id", "suppliers", "SET NULL"),
        ),
    ),
    _Table(
        "orders",
        (
            ("id", _KEY),
            ("customer_id", _REQUIRED_TEXT),
            ("sale_date", _TEXT),
            ("total_price", _MONEY),
            ("remaining_principal", _MONEY),
            ("total_interest_accrued", _MONEY),
            ("remaining_interest", _MONEY),
            ("total_paid", _MONEY),
            ("debt_type", _COUNT),
            ("current_interest_rate", _MONEY),
            ("debt_start_date", _TEXT),
            ("last_interest_calc_date", _TEXT),
            ("status", _COUNT),
            ("note", _TEXT),
        ),
        (_ForeignKey("customer_id", "customers", "CASCADE"),),
    ),
    _Table(
        "order_items",
        (
            ("id", _KEY),
            ("order_id", _REQUIRED_TEXT),
            ("product_id", _REQUIRED_TEXT),
            ("batch_id", _TEXT),
            ("quantity", _COUNT),
            ("unit_price", _MONEY),
            ("discount", _MONEY),
            ("principal_amount", _MONEY),
            ("current_interest_rate", _MONEY),
            ("note", _TEXT),
        ),
        (
            _ForeignKey("order_id", "orders", "CASCADE"),
            _ForeignKey("product_id", "products"),
            _ForeignKey("batch_id", "batches"),
        ),
    ),
    _Table(
        "interest_transactions",
        (
            ("id", _KEY),
            ("order_id", _REQUIRED_TEXT),
            ("order_item_id", _TEXT),
            ("from_date", _TEXT),
            ("to_date", _TEXT),
            ("interest_rate", _MONEY),
            ("base_amount", _MONEY),
            ("interest_amount", _MONEY),
            ("note", _TEXT),
        ),
        (
            _ForeignKey("order_id", "orders", "CASCADE"),
            _ForeignKey("order_item_id", "order_items", "SET NULL"),
        ),
    ),
    _Table(
        "payment_transactions",
        (
            ("id", _KEY),
            ("order_id", _REQUIRED_TEXT),
            ("order_item_id", _TEXT),
            ("pay_date", _TEXT),
            ("amount", _MONEY),
            ("type", _COUNT),
            ("note", _TEXT),
        ),
        (
            _ForeignKey("order_id", "orders", "CASCADE"),
            _ForeignKey("order_item_id", "order_items", "SET NULL"),
        ),
    ),
    _Table(
        "customer_stats",
        (
            ("customer_id", _KEY),
            ("total_orders", _COUNT),
            ("total_spent", _MONEY),
            ("total_paid", _MONEY),
            ("last_order_date", _TEXT),
            ("rank_level", _TEXT),
        ),
        (_ForeignKey("customer_id", "customers", "CASCADE"),),
    ),
)

_TABLES: Tuple[Tuple[str, str], ...] = tuple(
    (table.name, table.create_statement()) for table in _SCHEMA
)


class DatabaseError(Exception):
    """Raised when the store database cannot be opened or queried."""


@dataclass
class _Handle:
    file_path: Optional[str] = None
    connection: Optional[sqlite3.Connection] = None


class Database:
    """A named SQLite connection; instances with the same name share it."""

    _registry: Dict[str, _Handle] = {}

    def __init__(self, connection_name: Optional[str] = None) -> None:
        self.connection_name = connection_name or DEFAULT_CONNECTION_NAME
        self._handle = self._registry.setdefault(self.connection_name, _Handle())

    @property
    def file_path(self) -> Optional[str]:
        """Path of the database file last opened on this connection."""
        return self._handle.file_path

    def is_open(self) -> bool:
        """Whether the connection is open."""
        return self._handle.connection is not None

    def open(self, file_path: Union[str, "os.PathLike[str]"]) -> None:
        """Open or create the SQLite file and enable foreign keys."""
        self.close()
        self._handle.file_path = os.fspath(file_path)
        try:
            self._handle.connection = sqlite3.connect(self._handle.file_path)
        except sqlite3.Error as error:
            raise DatabaseError(f"failed to open database: {error}") from error
        try:
            self._exec("PRAGMA foreign_keys = ON;")
        except DatabaseError as error:
            self.close()
            raise DatabaseError("failed to enable foreign keys") from error

    def create_tables(self) -> None:
        """Create every table of the schema that does not exist yet."""
        if not self.is_open():
            raise DatabaseError("database is not open")
        for _name, sql in _TABLES:
            self._exec(sql)

    def close(self) -> None:
        """Close the connection if it is open."""
        connection = self._handle.connection
        if connection is not None:
            self._handle.connection = None
            connection.close()

    def _exec(self, sql: str) -> None:
        connection = self._handle.connection
        if connection is None:
            raise DatabaseError("database is not open")
        try:
            connection.execute(sql)
            connection.commit()
        except sqlite3.Error as error:
            raise DatabaseError(f"SQL error: {error}\nQuery: {sql}") from error

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()