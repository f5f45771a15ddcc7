"""
Delete Account Use Case

Soft-deletes an account.
"""

import logging

from wallboard.app.repositories.exceptions import AccountNotFoundError
from wallboard.app.services.unit_of_work import UnitOfWork
from wallboard.domain.errors import ErrorCode
from wallboard.libs.result import Error, Result, Return

from .dtos import DeleteAccountResponse

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """
    Use case for deleting an account.

    Business Rules:
    - Deletion is logical: status becomes Inactive and deleted_at is set
    - Deleted accounts disappear from every read and cannot be deleted again
    - The username becomes free for a new account
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: int) -> Result[DeleteAccountResponse]:
        async with self.uow:
            account = await self.uow.accounts.find_by_id(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.ACCOUNT_NOT_FOUND, "User not found"))

            try:
                await self.uow.accounts.soft_delete(account_id)
            except AccountNotFoundError:
                return Return.err(Error(ErrorCode.ACCOUNT_NOT_FOUND, "User not found"))

            username = account.username
            await self.uow.commit()

        logger.info("Account deleted: %s", username)
        return Return.ok(
            DeleteAccountResponse(status="deleted", message="User deleted successfully")
        )
