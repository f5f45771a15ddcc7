from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from wallboard.domain.entities import Account, AccountRole, AccountStatus


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock account repository
    uow.accounts = MagicMock()
    uow.accounts.find_all = AsyncMock(return_value=[])
    uow.accounts.find_by_id = AsyncMock(return_value=None)
    uow.accounts.find_by_username = AsyncMock(return_value=None)
    uow.accounts.username_exists = AsyncMock(return_value=False)
    uow.accounts.insert = AsyncMock()
    uow.accounts.apply_partial_update = AsyncMock()
    uow.accounts.soft_delete = AsyncMock()
    uow.accounts.record_login = AsyncMock()
    return uow


@pytest.fixture
def make_account():
    """Build a stored-looking Account with sensible defaults"""

    def _make(**overrides) -> Account:
        now = datetime.utcnow()
        values = dict(
            id=1,
            username="AG001",
            full_name="Jo Lee",
            role=AccountRole.agent,
            team_id=1,
            status=AccountStatus.active,
            created_at=now,
            updated_at=now,
        )
        values.update(overrides)
        return Account(**values)

    return _make
