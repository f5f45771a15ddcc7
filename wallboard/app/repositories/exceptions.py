"""
Exceptions raised by repository implementations.

Storage driver errors are classified into these before they leave the
adapter layer, so use cases never see driver-specific exceptions for
expected constraint failures.
"""

from enum import Enum


class ConstraintKind(str, Enum):
    unique = "unique"
    foreign_key = "foreign_key"


class AccountNotFoundError(LookupError):
    """No live (not soft-deleted) account matches the given id."""

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found or already deleted")


class StorageConstraintError(Exception):
    """A uniqueness or foreign-key constraint rejected the write."""

    def __init__(self, kind: ConstraintKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value} constraint violated: {detail}")
