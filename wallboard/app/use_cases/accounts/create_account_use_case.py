"""
Create Account Use Case

Handles creating a new wallboard operator account.
"""

import logging

from wallboard.app.repositories.exceptions import StorageConstraintError
from wallboard.app.services.unit_of_work import UnitOfWork
from wallboard.domain.entities import Account, AccountStatus
from wallboard.domain.errors import ErrorCode
from wallboard.domain.role_policy import (
    RoleConsistencyError,
    check_role_prefix,
    check_role_team,
)
from wallboard.domain.username_codec import (
    UsernameFormatError,
    parse_username,
    role_for_username,
)
from wallboard.libs.result import Error, Result, Return

from .dtos import AccountResponse, CreateAccountCommand
from .validation import (
    check_full_name,
    consistency_error,
    constraint_error,
    invalid_status_error,
    parse_status,
)

logger = logging.getLogger(__name__)


class CreateAccountUseCase:
    """
    Use case for creating an account.

    Business Rules:
    - Role is derived from the username prefix when not supplied
    - Username must be AGxxx, SPxxx or ADxxx (001-999)
    - Username must not be used by another live account
    - Agent/Supervisor need a team, Admin must not have one
    - An explicit role must agree with the username prefix
    - New accounts are Active unless a status is supplied
    - A duplicate that slips past the pre-check is rejected by the
      storage unique index and reported the same way
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateAccountCommand) -> Result[AccountResponse]:
        """
        Execute create account use case.

        Args:
            command: CreateAccountCommand with trimmed fields

        Returns:
            Result with the created account, or Error
        """
        username = command.username
        role = command.role

        # Derive role from prefix when not supplied
        if not role:
            try:
                role = role_for_username(username)
            except UsernameFormatError:
                return Return.err(
                    Error(ErrorCode.INVALID_ROLE, "Cannot infer role from username")
                )

        try:
            parse_username(username)
        except UsernameFormatError as exc:
            return Return.err(Error(ErrorCode.INVALID_FORMAT, str(exc)))

        name_error = check_full_name(command.full_name)
        if name_error is not None:
            return Return.err(name_error)

        status = AccountStatus.active
        if command.status:
            try:
                status = parse_status(command.status)
            except ValueError:
                return Return.err(invalid_status_error(command.status))

        async with self.uow:
            if await self.uow.accounts.username_exists(username):
                return Return.err(
                    Error(
                        ErrorCode.DUPLICATE_USERNAME,
                        f'Username "{username}" already exists',
                    )
                )

            try:
                account_role = check_role_team(role, command.team_id)
                check_role_prefix(username, account_role)
            except RoleConsistencyError as exc:
                return Return.err(consistency_error(exc))

            account = Account(
                username=username,
                full_name=command.full_name,
                role=account_role,
                team_id=command.team_id,
                status=status,
            )

            try:
                account = await self.uow.accounts.insert(account)
            except StorageConstraintError as exc:
                return Return.err(constraint_error(exc, username, command.team_id))

            response = AccountResponse.from_entity(account)
            await self.uow.commit()

        logger.info("Account created: %s (%s)", response.username, response.role.value)
        return Return.ok(response)
