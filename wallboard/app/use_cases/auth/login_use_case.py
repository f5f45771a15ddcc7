"""
Login Use Case

Handles code-based login for wallboard operators.
"""

import logging

from wallboard.app.repositories.exceptions import AccountNotFoundError
from wallboard.app.services.unit_of_work import UnitOfWork
from wallboard.app.use_cases.accounts.dtos import AccountResponse
from wallboard.domain.entities import AccountStatus
from wallboard.domain.errors import ErrorCode
from wallboard.libs.result import Error, Result, Return

from .dtos import LoginCommand, LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for logging in with an operator code.

    Business Rules:
    - No password: holding a valid, unique username is enough
    - Soft-deleted accounts cannot log in
    - Inactive accounts are rejected
    - Successful login stamps last_login_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with the trimmed code

        Returns:
            Result with the logged-in account, or Error
        """
        if not command.code:
            return Return.err(
                Error(
                    ErrorCode.CODE_REQUIRED,
                    "Agent code, Supervisor code, or username is required",
                )
            )

        async with self.uow:
            account = await self.uow.accounts.find_by_username(command.code)
            if account is None:
                return Return.err(Error(ErrorCode.INVALID_CODE, "Invalid username"))

            if account.status == AccountStatus.inactive:
                return Return.err(
                    Error(ErrorCode.ACCOUNT_INACTIVE, "User account is inactive")
                )

            try:
                await self.uow.accounts.record_login(account.id)
            except AccountNotFoundError:
                return Return.err(Error(ErrorCode.INVALID_CODE, "Invalid username"))

            # Re-read so the response carries the stored last_login_at
            account = await self.uow.accounts.find_by_id(account.id)
            response = LoginResponse(account=AccountResponse.from_entity(account))
            await self.uow.commit()

        logger.info("Login: %s", response.account.username)
        return Return.ok(response)
