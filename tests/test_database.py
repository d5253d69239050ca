import sqlite3
import uuid

import pytest

from storekeep.database import Database, DatabaseError

EXPECTED_TABLES = {
    "customers",
    "suppliers",
    "products",
    "batches",
    "orders",
    "order_items",
    "interest_transactions",
    "payment_transactions",
    "customer_stats",
}


@pytest.fixture
def db():
    database = Database(f"test-{uuid.uuid4().hex}")
    yield database
    database.close()


def _tables(path):
    with sqlite3.connect(path) as conn:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    return {name for (name,) in rows}


def _columns(path, table):
    with sqlite3.connect(path) as conn:
        return [row[1] for row in conn.execute(f"PRAGMA table_info({table})")]


def test_open_creates_file_and_is_open(db, tmp_path):
    path = tmp_path / "store.db"
    assert not db.is_open()
    db.open(path)
    assert db.is_open()
    assert path.exists()
    assert db.file_path == str(path)


def test_create_tables_builds_schema(db, tmp_path):
    path = tmp_path / "store.db"
    db.open(path)
    db.create_tables()
    db.close()
    assert _tables(path) == EXPECTED_TABLES


def test_create_tables_is_idempotent(db, tmp_path):
    path = tmp_path / "store.db"
    db.open(path)
    db.create_tables()
    db.create_tables()
    db.close()
    assert _tables(path) == EXPECTED_TABLES


def test_table_columns(db, tmp_path):
    path = tmp_path / "store.db"
    db.open(path)
    db.create_tables()
    db.close()
    assert _columns(path, "products") == ["id", "name", "price", "note"]
    assert "remaining_quantity" in _columns(path, "batches")
    assert "last_interest_calc_date" in _columns(path, "orders")


def test_create_tables_requires_open(db):
    with pytest.raises(DatabaseError):
        db.create_tables()


def test_open_invalid_path_raises(db, tmp_path):
    with pytest.raises(DatabaseError):
        db.open(tmp_path / "missing-dir" / "store.db")
    assert not db.is_open()


def test_close_marks_closed(db, tmp_path):
    db.open(tmp_path / "store.db")
    db.close()
    assert not db.is_open()
    with pytest.raises(DatabaseError):
        db.create_tables()


def test_context_manager_closes(tmp_path):
    name = f"ctx-{uuid.uuid4().hex}"
    with Database(name) as database:
        database.open(tmp_path / "store.db")
        assert database.is_open()
    assert not database.is_open()


def test_same_name_shares_connection(tmp_path):
    name = f"shared-{uuid.uuid4().hex}"
    first = Database(name)
    second = Database(name)
    first.open(tmp_path / "store.db")
    try:
        assert second.is_open()
        second.create_tables()
    finally:
        first.close()
    assert not second.is_open()
    assert _tables(tmp_path / "store.db") == EXPECTED_TABLES


def test_different_names_are_independent(tmp_path):
    first = Database(f"a-{uuid.uuid4().hex}")
    second = Database(f"b-{uuid.uuid4().hex}")
    first.open(tmp_path / "a.db")
    try:
        assert not second.is_open()
    finally:
        first.close()


def test_empty_name_uses_default():
    assert Database("").connection_name == Database().connection_name == "storeAppConnection"


def test_foreign_keys_enforced(db, tmp_path):
    path = tmp_path / "store.db"
    db.open(path)
    db.create_tables()
    with pytest.raises(sqlite3.IntegrityError):
        db._handle.connection.execute(
            "INSERT INTO batches (id, product_id) VALUES ('b1', 'no-such-product')"
        )