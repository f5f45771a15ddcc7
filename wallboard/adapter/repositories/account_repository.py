from datetime import datetime
from typing import Any, List, Mapping, Optional

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from wallboard.app.repositories.account_repository import (
    UPDATABLE_FIELDS,
    AccountFilter,
    IAccountRepository,
)
from wallboard.app.repositories.exceptions import (
    AccountNotFoundError,
    ConstraintKind,
    StorageConstraintError,
)
from wallboard.domain.entities import Account, AccountStatus

# SQLSTATE codes reported by PostgreSQL drivers
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def classify_integrity_error(exc: IntegrityError) -> Optional[ConstraintKind]:
    """Map a driver IntegrityError to a constraint kind, or None if unknown"""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == UNIQUE_VIOLATION:
        return ConstraintKind.unique
    if sqlstate == FOREIGN_KEY_VIOLATION:
        return ConstraintKind.foreign_key

    # SQLite only reports constraint failures in the message
    message = str(orig).upper()
    if "UNIQUE CONSTRAINT" in message:
        return ConstraintKind.unique
    if "FOREIGN KEY CONSTRAINT" in message:
        return ConstraintKind.foreign_key
    return None


def _live():
    return Account.deleted_at.is_(None)


def _select_accounts():
    # Always overwrite identity-map copies with what the database holds.
    # Team is loaded eagerly since async sessions cannot lazy load.
    return (
        select(Account)
        .options(selectinload(Account.team))
        .execution_options(populate_existing=True)
    )


def _select_live():
    return _select_accounts().where(_live())


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self, filters: AccountFilter) -> List[Account]:
        """List accounts matching filters, most recently created first"""
        stmt = _select_live()
        if filters.role is not None:
            stmt = stmt.where(Account.role == filters.role)
        if filters.status is not None:
            stmt = stmt.where(Account.status == filters.status)
        if filters.team_id is not None:
            stmt = stmt.where(Account.team_id == filters.team_id)
        stmt = stmt.order_by(Account.created_at.desc(), Account.id.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def find_by_id(self, account_id: int) -> Optional[Account]:
        """Get account by ID"""
        stmt = _select_live().where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_username(self, username: str) -> Optional[Account]:
        """Get account by username"""
        stmt = _select_live().where(Account.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def username_exists(self, username: str) -> bool:
        """Check whether a live account already uses this username"""
        stmt = (
            select(func.count())
            .select_from(Account)
            .where(Account.username == username, _live())
        )
        result = await self.session.exec(stmt)
        return result.one() > 0

    async def insert(self, account: Account) -> Account:
        """Insert a new account"""
        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            kind = classify_integrity_error(exc)
            if kind is None:
                raise
            raise StorageConstraintError(kind, str(exc.orig)) from exc
        return await self._reload(account.id)

    async def apply_partial_update(
        self, account_id: int, fields: Mapping[str, Any]
    ) -> Account:
        """Update only the given fields plus updated_at"""
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        values = dict(fields)
        values["updated_at"] = datetime.utcnow()
        await self._update_live(account_id, values)
        return await self._reload(account_id)

    async def soft_delete(self, account_id: int) -> None:
        """Mark account Inactive and stamp deleted_at"""
        now = datetime.utcnow()
        await self._update_live(
            account_id,
            {"status": AccountStatus.inactive, "deleted_at": now, "updated_at": now},
        )

    async def record_login(self, account_id: int) -> None:
        """Stamp last_login_at"""
        await self._update_live(account_id, {"last_login_at": datetime.utcnow()})

    async def _reload(self, account_id: int) -> Account:
        stmt = _select_accounts().where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one()

    async def _update_live(self, account_id: int, values: Mapping[str, Any]) -> None:
        stmt = (
            update(Account)
            .where(Account.id == account_id, _live())
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            kind = classify_integrity_error(exc)
            if kind is None:
                raise
            raise StorageConstraintError(kind, str(exc.orig)) from exc
        if result.rowcount == 0:
            raise AccountNotFoundError(account_id)
