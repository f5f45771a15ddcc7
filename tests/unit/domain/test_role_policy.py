import pytest

from wallboard.domain.entities import AccountRole
from wallboard.domain.role_policy import (
    PREFIX_MISMATCH,
    ROLE_REQUIRED,
    TEAM_FORBIDDEN,
    TEAM_REQUIRED,
    RoleConsistencyError,
    check_role_prefix,
    check_role_team,
)


@pytest.mark.parametrize("role", ["Agent", "Supervisor"])
def test_team_bound_roles_need_a_team(role):
    with pytest.raises(RoleConsistencyError) as exc_info:
        check_role_team(role, None)
    assert exc_info.value.reason == TEAM_REQUIRED

    assert check_role_team(role, 1) == AccountRole(role)


def test_admin_must_not_have_a_team():
    with pytest.raises(RoleConsistencyError) as exc_info:
        check_role_team("Admin", 1)
    assert exc_info.value.reason == TEAM_FORBIDDEN

    assert check_role_team("Admin", None) == AccountRole.admin


@pytest.mark.parametrize("role", [None, "", "Manager", "agent"])
def test_unknown_role_is_rejected(role):
    with pytest.raises(RoleConsistencyError) as exc_info:
        check_role_team(role, 1)
    assert exc_info.value.reason == ROLE_REQUIRED


def test_enum_role_is_accepted():
    assert check_role_team(AccountRole.supervisor, 3) == AccountRole.supervisor


def test_role_must_match_username_prefix():
    check_role_prefix("AG001", AccountRole.agent)
    check_role_prefix("SP001", AccountRole.supervisor)
    check_role_prefix("AD001", AccountRole.admin)

    with pytest.raises(RoleConsistencyError) as exc_info:
        check_role_prefix("AG001", AccountRole.admin)
    assert exc_info.value.reason == PREFIX_MISMATCH
