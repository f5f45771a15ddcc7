import asyncio

import pytest

from wallboard.app.repositories.exceptions import ConstraintKind, StorageConstraintError
from wallboard.app.use_cases.accounts import CreateAccountCommand, CreateAccountUseCase
from wallboard.domain.entities import AccountRole, AccountStatus


def _echo_insert(make_account):
    """insert() that returns what it was given, with an id assigned"""

    async def _insert(account):
        return make_account(
            id=7,
            username=account.username,
            full_name=account.full_name,
            role=account.role,
            team_id=account.team_id,
            status=account.status,
        )

    return _insert


@pytest.mark.asyncio
async def test_role_is_inferred_from_username_prefix(mock_uow, make_account):
    """AG001 with a team becomes an active Agent"""
    mock_uow.accounts.insert.side_effect = _echo_insert(make_account)

    use_case = CreateAccountUseCase(mock_uow)
    command = CreateAccountCommand(username="AG001", full_name="Jo Lee", team_id=1)

    result = await use_case.execute(command)

    assert result.is_ok()
    account = result.value
    assert account.id == 7
    assert account.role == AccountRole.agent
    assert account.status == AccountStatus.active
    assert account.team_id == 1

    mock_uow.accounts.username_exists.assert_called_once_with("AG001")
    inserted = mock_uow.accounts.insert.call_args[0][0]
    assert inserted.role == AccountRole.agent
    assert inserted.deleted_at is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_fields_are_trimmed(mock_uow, make_account):
    mock_uow.accounts.insert.side_effect = _echo_insert(make_account)

    command = CreateAccountCommand(
        username="  SP010 ", full_name="  Ann Wu  ", role=" Supervisor ", team_id=2
    )
    result = await CreateAccountUseCase(mock_uow).execute(command)

    assert result.is_ok()
    assert result.value.username == "SP010"
    assert result.value.full_name == "Ann Wu"
    assert result.value.role == AccountRole.supervisor


@pytest.mark.asyncio
async def test_agent_without_team_is_inconsistent(mock_uow, make_account):
    mock_uow.accounts.insert.side_effect = _echo_insert(make_account)
    use_case = CreateAccountUseCase(mock_uow)

    result = await use_case.execute(
        CreateAccountCommand(username="AG001", full_name="Jo Lee")
    )

    assert result.is_err()
    assert result.error.code == "ROLE_TEAM_INCONSISTENT"
    mock_uow.accounts.insert.assert_not_called()
    mock_uow.commit.assert_not_called()

    # Same draft with a team succeeds
    result = await use_case.execute(
        CreateAccountCommand(username="AG001", full_name="Jo Lee", team_id=1)
    )
    assert result.is_ok()


@pytest.mark.asyncio
async def test_admin_with_team_is_inconsistent(mock_uow):
    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AD001", full_name="Root Admin", team_id=1)
    )

    assert result.is_err()
    assert result.error.code == "ROLE_TEAM_INCONSISTENT"
    mock_uow.accounts.insert.assert_not_called()


@pytest.mark.asyncio
async def test_explicit_role_must_match_prefix(mock_uow):
    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AG002", full_name="Jo Lee", role="Admin")
    )

    assert result.is_err()
    assert result.error.code == "ROLE_TEAM_INCONSISTENT"
    mock_uow.accounts.insert.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_explicit_role_is_rejected(mock_uow):
    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AG002", full_name="Jo Lee", role="Manager", team_id=1)
    )

    assert result.is_err()
    assert result.error.code == "ROLE_TEAM_INCONSISTENT"


@pytest.mark.asyncio
async def test_unrecognized_prefix_cannot_infer_role(mock_uow):
    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="XX001", full_name="Jo Lee", team_id=1)
    )

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    mock_uow.accounts.username_exists.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("username", ["AG000", "AG1000", "AG01"])
async def test_malformed_username_is_rejected(mock_uow, username):
    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username=username, full_name="Jo Lee", team_id=1)
    )

    assert result.is_err()
    assert result.error.code == "INVALID_FORMAT"
    mock_uow.accounts.insert.assert_not_called()


@pytest.mark.asyncio
async def test_short_full_name_is_rejected(mock_uow):
    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AG001", full_name=" J ", team_id=1)
    )

    assert result.is_err()
    assert result.error.code == "INVALID_FORMAT"


@pytest.mark.asyncio
async def test_unknown_status_is_rejected(mock_uow):
    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AG001", full_name="Jo Lee", team_id=1, status="Away")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_FORMAT"


@pytest.mark.asyncio
async def test_explicit_inactive_status_is_kept(mock_uow, make_account):
    mock_uow.accounts.insert.side_effect = _echo_insert(make_account)

    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AG001", full_name="Jo Lee", team_id=1, status="Inactive")
    )

    assert result.is_ok()
    assert result.value.status == AccountStatus.inactive


@pytest.mark.asyncio
async def test_duplicate_username_is_rejected(mock_uow):
    mock_uow.accounts.username_exists.return_value = True

    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AG001", full_name="Jo Lee", team_id=1)
    )

    assert result.is_err()
    assert result.error.code == "DUPLICATE_USERNAME"
    mock_uow.accounts.insert.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_consistency_error_wins_over_unknown_team(mock_uow):
    """Validation happens before the storage layer can raise a foreign-key error"""
    mock_uow.accounts.insert.side_effect = StorageConstraintError(ConstraintKind.foreign_key)

    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AD001", full_name="Root Admin", team_id=99)
    )

    assert result.error.code == "ROLE_TEAM_INCONSISTENT"
    mock_uow.accounts.insert.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_team_is_reported(mock_uow):
    mock_uow.accounts.insert.side_effect = StorageConstraintError(ConstraintKind.foreign_key)

    result = await CreateAccountUseCase(mock_uow).execute(
        CreateAccountCommand(username="AG001", full_name="Jo Lee", team_id=99)
    )

    assert result.is_err()
    assert result.error.code == "INVALID_TEAM"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_racing_duplicate_inserts_yield_one_success(mock_uow, make_account):
    """Both pre-checks pass; the storage unique index rejects the loser"""
    winner = make_account(id=1)
    mock_uow.accounts.username_exists.return_value = False
    mock_uow.accounts.insert.side_effect = [
        winner,
        StorageConstraintError(ConstraintKind.unique, "UNIQUE constraint failed"),
    ]

    command = CreateAccountCommand(username="AG001", full_name="Jo Lee", team_id=1)
    results = await asyncio.gather(
        CreateAccountUseCase(mock_uow).execute(command),
        CreateAccountUseCase(mock_uow).execute(command),
    )

    assert sum(result.is_ok() for result in results) == 1
    failures = [result for result in results if result.is_err()]
    assert len(failures) == 1
    assert failures[0].error.code == "DUPLICATE_USERNAME"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unclassified_storage_error_propagates(mock_uow):
    mock_uow.accounts.insert.side_effect = RuntimeError("disk I/O error")

    with pytest.raises(RuntimeError):
        await CreateAccountUseCase(mock_uow).execute(
            CreateAccountCommand(username="AG001", full_name="Jo Lee", team_id=1)
        )
    mock_uow.commit.assert_not_called()
