"""
Employee store backends.

``create_store`` builds the backend named by ``settings.storage_backend``.
"""

from employee_management_api.app.core.config import Settings, settings as default_settings
from employee_management_api.app.stores.base import EmployeeStore
from employee_management_api.app.stores.memory import InMemoryEmployeeStore
from employee_management_api.app.stores.sqlite import SQLiteEmployeeStore

__all__ = ["EmployeeStore", "InMemoryEmployeeStore", "SQLiteEmployeeStore", "create_store"]


def create_store(settings: Settings = default_settings) -> EmployeeStore:
    """Return a new, uninitialised store for the configured backend."""
    backend = settings.storage_backend
    if backend == "sqlite":
        return SQLiteEmployeeStore(settings.database_url)
    if backend == "memory":
        return InMemoryEmployeeStore()
    raise ValueError(f"Unknown storage backend: {backend!r}")
