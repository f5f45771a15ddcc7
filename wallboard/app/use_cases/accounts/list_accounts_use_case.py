"""
List Accounts Use Case

Lists live accounts, newest first, with optional role/status/team filters.
"""

from typing import Optional

from wallboard.app.repositories.account_repository import AccountFilter
from wallboard.app.services.unit_of_work import UnitOfWork
from wallboard.libs.result import Result, Return

from .dtos import AccountListResponse, AccountResponse


class ListAccountsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, filters: Optional[AccountFilter] = None
    ) -> Result[AccountListResponse]:
        async with self.uow:
            accounts = await self.uow.accounts.find_all(filters or AccountFilter())
            data = [AccountResponse.from_entity(account) for account in accounts]

        return Return.ok(AccountListResponse(data=data, count=len(data)))
