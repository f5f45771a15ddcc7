"""
Account Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- Commands: input to use cases, strings are trimmed on construction
- Responses: output from use cases, decoupled from the HTTP layer
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wallboard.domain.entities import Account, AccountRole, AccountStatus


def normalize_team_id(value: Any) -> Any:
    # Blank form values mean "no team"
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("Invalid teamId")
    return value


# ============================================================================
# Command DTOs
# ============================================================================


class CreateAccountCommand(BaseModel):
    """
    Create account command - represents validated creation intent

    role and status are kept as plain strings so the use case can classify
    bad values into the error taxonomy instead of failing validation.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str
    full_name: str
    role: Optional[str] = None
    team_id: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = None

    @field_validator("team_id", mode="before")
    @classmethod
    def blank_team_id(cls, value: Any) -> Any:
        return normalize_team_id(value)


class UpdateAccountCommand(BaseModel):
    """
    Partial update command

    Only fields explicitly set by the caller are applied. A field that was
    not sent is left unchanged; team_id=None clears the team.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    username: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None
    team_id: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = None

    @field_validator("team_id", mode="before")
    @classmethod
    def blank_team_id(cls, value: Any) -> Any:
        return normalize_team_id(value)

    def changes(self) -> dict:
        """Fields the caller actually sent, explicit nulls included"""
        return self.model_dump(exclude_unset=True)


# ============================================================================
# Response DTOs
# ============================================================================


class AccountResponse(BaseModel):
    """Account as seen by callers; soft-delete bookkeeping is not exposed"""

    id: int
    username: str
    full_name: str
    role: AccountRole
    team_id: Optional[int] = Field(default=None, ge=0)
    team_name: Optional[str] = None
    status: AccountStatus
    created_at: datetime
    updated_at: datetime
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            username=account.username,
            full_name=account.full_name,
            role=account.role,
            team_id=account.team_id,
            team_name=account.team.team_name if account.team is not None else None,
            status=account.status,
            created_at=account.created_at,
            updated_at=account.updated_at,
            last_login_at=account.last_login_at,
        )


class AccountListResponse(BaseModel):
    data: List[AccountResponse]
    count: int


class DeleteAccountResponse(BaseModel):
    status: str
    message: str
