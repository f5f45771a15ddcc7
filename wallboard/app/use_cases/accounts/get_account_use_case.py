"""
Get Account Use Case

Loads a single live account.
"""

from wallboard.app.services.unit_of_work import UnitOfWork
from wallboard.domain.errors import ErrorCode
from wallboard.libs.result import Error, Result, Return

from .dtos import AccountResponse


class GetAccountUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: int) -> Result[AccountResponse]:
        async with self.uow:
            account = await self.uow.accounts.find_by_id(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.ACCOUNT_NOT_FOUND, "User not found"))

            return Return.ok(AccountResponse.from_entity(account))
