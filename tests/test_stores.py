"""Backend specific behaviour of the employee stores."""

import sqlite3

import pytest

from employee_management_api.app.core.config import Settings
from employee_management_api.app.core.db import MIGRATIONS, get_database_path, init_db
from employee_management_api.app.core.exceptions import NotFoundError, ValidationError
from employee_management_api.app.stores import (
    InMemoryEmployeeStore,
    SQLiteEmployeeStore,
    create_store,
)

PROFILE = {
    "name": "Alice",
    "gender": "FEMALE",
    "department": "Engineering",
    "designation": "Developer",
    "email": "alice@example.com",
    "contact": "+15551234567",
    "salary": 55000.0,
}


def test_ids_are_not_reused_after_delete(store):
    first = store.create(PROFILE, "hash")
    store.delete(first.id)

    second = store.create(PROFILE, "hash")

    assert second.id == first.id + 1


def test_duplicate_explicit_id_is_rejected(store):
    store.create(PROFILE, "hash", employee_id=10)

    with pytest.raises(ValidationError, match="already exists"):
        store.create(PROFILE, "other", employee_id=10)
    assert store.get_password_hash(10) == "hash"


def test_update_unknown_id_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.update(5, PROFILE)


def test_password_hash_of_unknown_id_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.get_password_hash(5)


@pytest.mark.parametrize("employee_id", [0, -1, 2**63])
def test_out_of_range_explicit_id_is_rejected(store, employee_id):
    with pytest.raises(ValidationError, match="out of range"):
        store.create(PROFILE, "hash", employee_id=employee_id)
    assert store.list() == []


def test_lookups_beyond_64_bits_raise_not_found(store):
    huge = 2**63

    with pytest.raises(NotFoundError):
        store.get(huge)
    with pytest.raises(NotFoundError):
        store.update(huge, PROFILE)
    with pytest.raises(NotFoundError):
        store.delete(huge)
    with pytest.raises(NotFoundError):
        store.get_password_hash(huge)


def test_largest_id_is_accepted(store):
    largest = 2**63 - 1

    store.create(PROFILE, "hash", employee_id=largest)

    assert store.get(largest).id == largest


def test_memory_stores_are_independent():
    first, second = InMemoryEmployeeStore(), InMemoryEmployeeStore()
    first.create(PROFILE, "hash")

    assert len(first.list()) == 1
    assert second.list() == []


def test_memory_store_copies_profile():
    store = InMemoryEmployeeStore()
    profile = dict(PROFILE)
    store.create(profile, "hash")

    profile["name"] = "Mallory"

    assert store.get(1).name == "Alice"


def test_sqlite_store_persists_across_instances(tmp_path):
    path = str(tmp_path / "employees.db")
    writer = SQLiteEmployeeStore(path)
    writer.initialize()
    created = writer.create(PROFILE, "hash")

    reader = SQLiteEmployeeStore(path)
    reader.initialize()

    assert reader.get(created.id) == created


def test_sqlite_update_touches_updated_at(sqlite_store):
    sqlite_store.create(PROFILE, "hash")
    conn = sqlite3.connect(sqlite_store.database_path)
    try:
        conn.execute("UPDATE employees SET updated_at = '2000-01-01 00:00:00' WHERE id = 1")
        conn.commit()
    finally:
        conn.close()

    sqlite_store.update(1, dict(PROFILE, name="Alice B."))

    conn = sqlite3.connect(sqlite_store.database_path)
    try:
        (updated_at,) = conn.execute("SELECT updated_at FROM employees WHERE id = 1").fetchone()
    finally:
        conn.close()
    assert updated_at != "2000-01-01 00:00:00"


def test_init_db_is_idempotent(tmp_path):
    path = str(tmp_path / "employees.db")
    latest = MIGRATIONS[-1][0]

    assert init_db(path) == latest
    assert init_db(path) == latest

    conn = sqlite3.connect(path)
    try:
        versions = [row[0] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    finally:
        conn.close()
    assert versions == [version for version, _ in MIGRATIONS]


def test_schema_has_only_the_employees_table(tmp_path):
    path = str(tmp_path / "employees.db")
    init_db(path)

    conn = sqlite3.connect(path)
    try:
        indexes = conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'index' AND name NOT LIKE 'sqlite_%'"
        ).fetchall()
        versions = conn.execute("SELECT version FROM migrations").fetchall()
    finally:
        conn.close()
    assert indexes == []
    assert versions == [(1,)]


def test_relative_database_path_is_resolved(tmp_path):
    assert get_database_path(str(tmp_path / "x.db")) == str(tmp_path / "x.db")
    resolved = get_database_path("employees.db")
    assert resolved.endswith("employees.db")
    assert resolved != "employees.db"


@pytest.mark.parametrize(
    "backend, expected",
    [("memory", InMemoryEmployeeStore), ("sqlite", SQLiteEmployeeStore)],
)
def test_create_store_picks_backend(tmp_path, backend, expected):
    settings = Settings(storage_backend=backend, database_url=str(tmp_path / "employees.db"))

    assert isinstance(create_store(settings), expected)


def test_create_store_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unknown storage backend"):
        create_store(Settings(storage_backend="mongo"))
