"""
Update Account Use Case

Applies a partial update to an existing account.
"""

import logging
from typing import Any, Dict

from wallboard.app.repositories.exceptions import (
    AccountNotFoundError,
    StorageConstraintError,
)
from wallboard.app.services.unit_of_work import UnitOfWork
from wallboard.domain.errors import ErrorCode
from wallboard.domain.role_policy import (
    RoleConsistencyError,
    check_role_prefix,
    check_role_team,
)
from wallboard.libs.result import Error, Result, Return

from .dtos import AccountResponse, UpdateAccountCommand
from .validation import (
    check_full_name,
    consistency_error,
    constraint_error,
    invalid_status_error,
    parse_status,
)

logger = logging.getLogger(__name__)


class UpdateAccountUseCase:
    """
    Use case for partially updating an account.

    Business Rules:
    - Account must exist and not be soft-deleted
    - Username can never change
    - Fields missing from the command are left untouched
    - team_id=None clears the team, which is only valid for Admin
    - Role/team consistency is checked on the effective pair (new value if
      sent, stored value otherwise) whenever either one is sent
    - Only the sent fields are written; the stored row is returned
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: int, command: UpdateAccountCommand
    ) -> Result[AccountResponse]:
        """
        Execute update account use case.

        Args:
            account_id: Account to update
            command: UpdateAccountCommand; unset fields are ignored

        Returns:
            Result with the updated account, or Error
        """
        changes = command.changes()

        async with self.uow:
            existing = await self.uow.accounts.find_by_id(account_id)
            if existing is None:
                return Return.err(Error(ErrorCode.ACCOUNT_NOT_FOUND, "User not found"))

            # null username is treated as not sent
            username = changes.get("username")
            if username is not None and username != existing.username:
                return Return.err(
                    Error(ErrorCode.IMMUTABLE_FIELD, "Username cannot be changed")
                )

            fields: Dict[str, Any] = {}

            if "full_name" in changes:
                name_error = check_full_name(changes["full_name"])
                if name_error is not None:
                    return Return.err(name_error)
                fields["full_name"] = changes["full_name"]

            if "status" in changes:
                try:
                    fields["status"] = parse_status(changes["status"])
                except ValueError:
                    return Return.err(invalid_status_error(changes["status"]))

            if "role" in changes or "team_id" in changes:
                effective_role = changes.get("role", existing.role)
                effective_team_id = changes.get("team_id", existing.team_id)
                try:
                    account_role = check_role_team(effective_role, effective_team_id)
                    check_role_prefix(existing.username, account_role)
                except RoleConsistencyError as exc:
                    return Return.err(consistency_error(exc))

                if "role" in changes:
                    fields["role"] = account_role
                if "team_id" in changes:
                    fields["team_id"] = effective_team_id

            if not fields:
                return Return.ok(AccountResponse.from_entity(existing))

            try:
                account = await self.uow.accounts.apply_partial_update(account_id, fields)
            except AccountNotFoundError:
                return Return.err(Error(ErrorCode.ACCOUNT_NOT_FOUND, "User not found"))
            except StorageConstraintError as exc:
                return Return.err(
                    constraint_error(exc, existing.username, fields.get("team_id"))
                )

            response = AccountResponse.from_entity(account)
            await self.uow.commit()

        logger.info(
            "Account %s updated: %s", response.username, ", ".join(sorted(fields))
        )
        return Return.ok(response)
