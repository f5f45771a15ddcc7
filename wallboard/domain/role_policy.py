"""
Role-consistency policy.

Binds an account role to its team membership and to its username prefix:
- Agent and Supervisor must belong to a team
- Admin must not belong to a team
- The role must match the username prefix (AG/SP/AD)
"""

from typing import Any, Optional

from wallboard.domain.entities import AccountRole
from wallboard.domain.username_codec import ROLE_PREFIXES

TEAM_BOUND_ROLES = frozenset({AccountRole.agent, AccountRole.supervisor})

ROLE_REQUIRED = "role required"
TEAM_REQUIRED = "team required"
TEAM_FORBIDDEN = "team forbidden"
PREFIX_MISMATCH = "prefix mismatch"


class RoleConsistencyError(ValueError):
    def __init__(self, reason: str, message: str):
        self.reason = reason
        super().__init__(message)


def check_role_team(role: Any, team_id: Optional[int]) -> AccountRole:
    """
    Validate a role/team pair and return the canonical role.

    Raises:
        RoleConsistencyError: with reason ROLE_REQUIRED, TEAM_REQUIRED or
            TEAM_FORBIDDEN
    """
    try:
        account_role = AccountRole(role)
    except ValueError:
        raise RoleConsistencyError(
            ROLE_REQUIRED,
            f'Invalid role "{role}". Allowed: Agent, Supervisor, Admin',
        ) from None

    if account_role in TEAM_BOUND_ROLES and team_id is None:
        raise RoleConsistencyError(
            TEAM_REQUIRED, "Team ID is required for Agent and Supervisor roles"
        )

    if account_role == AccountRole.admin and team_id is not None:
        raise RoleConsistencyError(TEAM_FORBIDDEN, "Admin should not have a teamId")

    return account_role


def check_role_prefix(username: str, role: AccountRole) -> None:
    expected_prefix = ROLE_PREFIXES[role]
    if not username.startswith(expected_prefix):
        raise RoleConsistencyError(
            PREFIX_MISMATCH,
            f'Role "{role.value}" requires a username starting with {expected_prefix}',
        )
