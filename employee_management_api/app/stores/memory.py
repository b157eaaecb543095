"""In‑memory employee store.

Records live in a dict owned by the store instance, so every instance
is independent.  Ids come from a counter that only moves forward,
which mirrors SQLite's ``AUTOINCREMENT``: a deleted id is never handed
out again.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

from employee_management_api.app.core.exceptions import NotFoundError, ValidationError
from employee_management_api.app.schemas.employee import MAX_EMPLOYEE_ID, EmployeeRead
from employee_management_api.app.stores.base import EmployeeStore

logger = logging.getLogger(__name__)


class InMemoryEmployeeStore(EmployeeStore):
    def __init__(self) -> None:
        self._records: Dict[int, Tuple[Dict[str, Any], str]] = {}
        self._last_id = 0
        # Request handlers run in a thread pool.
        self._lock = threading.Lock()

    def create(
        self,
        profile: Dict[str, Any],
        password_hash: str,
        employee_id: Optional[int] = None,
    ) -> EmployeeRead:
        with self._lock:
            if employee_id is None:
                employee_id = self._last_id + 1
            elif not 0 < employee_id <= MAX_EMPLOYEE_ID:
                raise ValidationError(f"Employee id {employee_id} is out of range")
            elif employee_id in self._records:
                raise ValidationError(f"Employee with id {employee_id} already exists")
            self._last_id = max(self._last_id, employee_id)
            self._records[employee_id] = (dict(profile), password_hash)
        logger.info("Created employee %s", employee_id)
        return EmployeeRead(id=employee_id, **profile)

    def list(self) -> List[EmployeeRead]:
        with self._lock:
            items = sorted(self._records.items())
        return [EmployeeRead(id=employee_id, **profile) for employee_id, (profile, _) in items]

    def get(self, employee_id: int) -> EmployeeRead:
        profile, _ = self._lookup(employee_id)
        return EmployeeRead(id=employee_id, **profile)

    def update(
        self,
        employee_id: int,
        profile: Dict[str, Any],
        password_hash: Optional[str] = None,
    ) -> EmployeeRead:
        with self._lock:
            if employee_id not in self._records:
                raise NotFoundError(employee_id=employee_id)
            _, current_hash = self._records[employee_id]
            self._records[employee_id] = (dict(profile), password_hash or current_hash)
        logger.info("Updated employee %s", employee_id)
        return EmployeeRead(id=employee_id, **profile)

    def delete(self, employee_id: int) -> None:
        with self._lock:
            if self._records.pop(employee_id, None) is None:
                raise NotFoundError(employee_id=employee_id)
        logger.info("Deleted employee %s", employee_id)

    def get_password_hash(self, employee_id: int) -> str:
        _, password_hash = self._lookup(employee_id)
        return password_hash

    def _lookup(self, employee_id: int) -> Tuple[Dict[str, Any], str]:
        with self._lock:
            record = self._records.get(employee_id)
        if record is None:
            raise NotFoundError(employee_id=employee_id)
        return record
