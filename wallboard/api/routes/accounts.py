from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field, field_validator

from wallboard.api.error import ClientError, ServerError
from wallboard.app.repositories.account_repository import AccountFilter
from wallboard.app.services.unit_of_work import UnitOfWork
from wallboard.app.use_cases.accounts import (
    AccountListResponse,
    AccountResponse,
    CreateAccountCommand,
    CreateAccountUseCase,
    DeleteAccountResponse,
    DeleteAccountUseCase,
    GetAccountUseCase,
    ListAccountsUseCase,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from wallboard.app.use_cases.accounts.dtos import normalize_team_id
from wallboard.depends import get_unit_of_work
from wallboard.domain.entities import AccountRole, AccountStatus
from wallboard.domain.errors import ErrorCode
from wallboard.libs.result import Error

router = APIRouter(prefix="/users", tags=["Users"])

BAD_REQUEST_CODES = {
    ErrorCode.INVALID_FORMAT,
    ErrorCode.INVALID_ROLE,
    ErrorCode.ROLE_TEAM_INCONSISTENT,
    ErrorCode.IMMUTABLE_FIELD,
    ErrorCode.INVALID_TEAM,
}


def raise_for_error(error: Error):
    if error.code == ErrorCode.ACCOUNT_NOT_FOUND:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == ErrorCode.DUPLICATE_USERNAME:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    if error.code in BAD_REQUEST_CODES:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


class CreateAccountRequest(BaseModel):
    """
    Create account HTTP request payload

    Format rules are enforced by the use case so that every rejection
    carries an error code.
    """

    username: str = Field(..., description="AGxxx, SPxxx or ADxxx")
    full_name: str = Field(..., description="Display name, at least 2 characters")
    role: Optional[str] = Field(None, description="Derived from username when omitted")
    team_id: Optional[int] = Field(None, ge=0, description="Required for Agent and Supervisor")
    status: Optional[str] = Field(None, description="Active (default) or Inactive")

    @field_validator("team_id", mode="before")
    @classmethod
    def blank_team_id(cls, value: Any) -> Any:
        return normalize_team_id(value)


class UpdateAccountRequest(BaseModel):
    """Partial update payload; omitted fields stay unchanged"""

    username: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None
    team_id: Optional[int] = Field(None, ge=0)
    status: Optional[str] = None

    @field_validator("team_id", mode="before")
    @classmethod
    def blank_team_id(cls, value: Any) -> Any:
        return normalize_team_id(value)


@router.get("", status_code=status.HTTP_200_OK, response_model=AccountListResponse)
async def list_accounts(
    role: Optional[AccountRole] = Query(None),
    account_status: Optional[AccountStatus] = Query(None, alias="status"),
    team_id: Optional[int] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Returns live (not deleted) accounts, newest first.

    Raises:
        - 422 Unprocessable Entity: Unknown role or status filter
    """
    use_case = ListAccountsUseCase(uow)
    result = await use_case.execute(
        AccountFilter(role=role, status=account_status, team_id=team_id)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def get_account(account_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get User by ID

    Raises:
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    use_case = GetAccountUseCase(uow)
    result = await use_case.execute(account_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccountResponse)
async def create_account(
    request: CreateAccountRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create User

    Raises:
        - 400 Bad Request: INVALID_FORMAT, INVALID_ROLE, ROLE_TEAM_INCONSISTENT,
          INVALID_TEAM
        - 409 Conflict: DUPLICATE_USERNAME
        - 500 Internal Server Error: Server error
    """
    command = CreateAccountCommand(**request.model_dump())

    use_case = CreateAccountUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def update_account(
    account_id: int,
    request: UpdateAccountRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User (partial)

    Only fields present in the body are changed. Send team_id=null to
    remove an Admin from a team.

    Raises:
        - 400 Bad Request: IMMUTABLE_FIELD, INVALID_FORMAT,
          ROLE_TEAM_INCONSISTENT, INVALID_TEAM
        - 404 Not Found: ACCOUNT_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    # exclude_unset keeps "not sent" distinct from "sent as null"
    command = UpdateAccountCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateAccountUseCase(uow)
    result = await use_case.execute(account_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{account_id}", status_code=status.HTTP_200_OK, response_model=DeleteAccountResponse
)
async def delete_account(account_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete User (soft delete)

    Raises:
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    use_case = DeleteAccountUseCase(uow)
    result = await use_case.execute(account_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
