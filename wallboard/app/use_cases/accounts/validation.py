"""
Field checks shared by the account use cases.

Each helper returns an Error for the caller to wrap in Return.err, or None
when the value is acceptable.
"""

from typing import Optional

from wallboard.app.repositories.exceptions import ConstraintKind, StorageConstraintError
from wallboard.domain.entities import AccountStatus
from wallboard.domain.errors import ErrorCode
from wallboard.domain.role_policy import RoleConsistencyError
from wallboard.libs.result import Error

MIN_FULL_NAME_LENGTH = 2


def check_full_name(full_name: Optional[str]) -> Optional[Error]:
    if full_name is None or len(full_name) < MIN_FULL_NAME_LENGTH:
        return Error(
            ErrorCode.INVALID_FORMAT,
            f"Full name must be at least {MIN_FULL_NAME_LENGTH} characters",
        )
    return None


def parse_status(status: Optional[str]) -> AccountStatus:
    """Raises ValueError for anything other than Active/Inactive"""
    return AccountStatus(status)


def invalid_status_error(status: Optional[str]) -> Error:
    return Error(
        ErrorCode.INVALID_FORMAT,
        f'Invalid status "{status}". Allowed: Active, Inactive',
    )


def consistency_error(exc: RoleConsistencyError) -> Error:
    return Error(ErrorCode.ROLE_TEAM_INCONSISTENT, str(exc))


def constraint_error(
    exc: StorageConstraintError, username: str, team_id: Optional[int]
) -> Error:
    if exc.kind == ConstraintKind.unique:
        return Error(ErrorCode.DUPLICATE_USERNAME, f'Username "{username}" already exists')
    return Error(ErrorCode.INVALID_TEAM, f"Team ID {team_id} does not exist")
