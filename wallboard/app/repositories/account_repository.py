from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel

from wallboard.domain.entities import Account, AccountRole, AccountStatus

# Columns an update may touch; username and timestamps are never in here
UPDATABLE_FIELDS = frozenset({"full_name", "role", "team_id", "status"})


class AccountFilter(BaseModel):
    """Optional equality filters for listing accounts"""

    role: Optional[AccountRole] = None
    status: Optional[AccountStatus] = None
    team_id: Optional[int] = None


class IAccountRepository(ABC):
    """Account repository interface - application layer

    Every query excludes soft-deleted accounts.
    """

    @abstractmethod
    async def find_all(self, filters: AccountFilter) -> List[Account]:
        """List accounts matching filters, most recently created first"""
        pass

    @abstractmethod
    async def find_by_id(self, account_id: int) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Account]:
        """Get account by username"""
        pass

    @abstractmethod
    async def username_exists(self, username: str) -> bool:
        """Check whether a live account already uses this username"""
        pass

    @abstractmethod
    async def insert(self, account: Account) -> Account:
        """Insert a new account.

        Raises StorageConstraintError on unique or foreign-key violations.
        """
        pass

    @abstractmethod
    async def apply_partial_update(
        self, account_id: int, fields: Mapping[str, Any]
    ) -> Account:
        """Update only the given fields plus updated_at.

        Raises AccountNotFoundError or StorageConstraintError.
        """
        pass

    @abstractmethod
    async def soft_delete(self, account_id: int) -> None:
        """Mark account Inactive and stamp deleted_at.

        Raises AccountNotFoundError.
        """
        pass

    @abstractmethod
    async def record_login(self, account_id: int) -> None:
        """Stamp last_login_at.

        Raises AccountNotFoundError.
        """
        pass
