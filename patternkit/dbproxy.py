"""Role-based access to a database through a guarding proxy."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Role(Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class AccessDenied(PermissionError):
    """Raised when a role may not perform the requested operation."""


class Database:
    """The real database; records every operation it performs."""

    def __init__(self) -> None:
        self.operations: list[str] = []

    def _record(self, line: str) -> None:
        logger.info(line)
        self.operations.append(line)

    def update(self, data: int) -> None:
        self._record(f"Data updated in actual database: {data}")

    def get(self, record_id: int) -> str:
        self._record(f"Data retrieved from actual database for ID: {record_id}")
        return f"Data for ID: {record_id}"

    def delete(self, record_id: int) -> None:
        self._record(f"Data deleted from actual database for ID: {record_id}")

    def insert(self, data: int) -> None:
        self._record(f"Data inserted into actual database: {data}")


class DatabaseProxy:
    """Checks the caller's role before passing an operation to the database.

    Admins may do everything; users may insert and update; guests may do nothing.
    """

    def __init__(self, database: Database | None = None) -> None:
        self.database = database if database is not None else Database()

    def update(self, role: Role, data: int) -> None:
        if role is Role.GUEST:
            raise AccessDenied("Guest users are not allowed to update data.")
        self.database.update(data)

    def get(self, role: Role, record_id: int) -> str:
        if role in (Role.GUEST, Role.USER):
            raise AccessDenied("Guest and User are not allowed to retrieve data.")
        return self.database.get(record_id)

    def delete(self, role: Role, record_id: int) -> None:
        if role is not Role.ADMIN:
            raise AccessDenied("Only admin users are allowed to delete data.")
        self.database.delete(record_id)

    def insert(self, role: Role, data: int) -> None:
        if role is Role.GUEST:
            raise AccessDenied("Guest users are not allowed to insert data.")
        self.database.insert(data)