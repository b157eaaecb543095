"""
Storage boundary for employee records.

``EmployeeStore`` lists the primitives every backend provides.  The
service layer only talks to this interface, so backends can be
swapped (SQLite in production, in‑memory in tests) without touching
business logic or API handlers.

Backends own record lifetime and id assignment and raise
``NotFoundError`` / ``ValidationError`` from ``core.exceptions``.
Profiles are passed as plain dicts keyed by
``schemas.employee.PROFILE_FIELDS``; passwords arrive already hashed.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from employee_management_api.app.schemas.employee import EmployeeRead


class EmployeeStore(ABC):
    """Persistence primitives keyed by integer employee id."""

    def initialize(self) -> None:
        """Prepare the backend (create tables, etc.).  No‑op by default."""

    @abstractmethod
    def create(
        self,
        profile: Dict[str, Any],
        password_hash: str,
        employee_id: Optional[int] = None,
    ) -> EmployeeRead:
        """Insert a record and return it with its id.

        With ``employee_id`` of ``None`` the store assigns the next
        id.  A caller‑supplied id that is already taken, or outside
        ``1..MAX_EMPLOYEE_ID``, raises ``ValidationError``.
        """

    @abstractmethod
    def list(self) -> List[EmployeeRead]:
        """Return every record ordered by id."""

    @abstractmethod
    def get(self, employee_id: int) -> EmployeeRead:
        """Return one record or raise ``NotFoundError``."""

    @abstractmethod
    def update(
        self,
        employee_id: int,
        profile: Dict[str, Any],
        password_hash: Optional[str] = None,
    ) -> EmployeeRead:
        """Overwrite a record's profile (and password if given) or raise ``NotFoundError``."""

    @abstractmethod
    def delete(self, employee_id: int) -> None:
        """Remove a record or raise ``NotFoundError``."""

    @abstractmethod
    def get_password_hash(self, employee_id: int) -> str:
        """Return the stored password hash or raise ``NotFoundError``."""
