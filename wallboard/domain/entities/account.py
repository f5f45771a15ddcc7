"""
Account Entity

An operator identity: agent, supervisor or admin.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from .enums import AccountRole, AccountStatus

if TYPE_CHECKING:
    from .team import Team


class Account(SQLModel, table=True):
    """
    Account entity - a wallboard operator.

    Business Rules:
    - username is <AG|SP|AD><001-999> and never changes after creation
    - username is unique among accounts that are not soft-deleted
    - Agents and Supervisors belong to a team, Admins never do
    - Soft delete stamps deleted_at; rows are never physically removed
    """

    __tablename__ = "accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=5, nullable=False)
    full_name: str = Field(max_length=100, nullable=False)

    role: AccountRole = Field(nullable=False)
    team_id: Optional[int] = Field(default=None, foreign_key="teams.id", index=True)
    status: AccountStatus = Field(default=AccountStatus.active)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Relationships
    team: Optional["Team"] = Relationship()

    __table_args__ = (
        # Usernames of soft-deleted accounts may be reused
        Index(
            "uq_account_username_live",
            "username",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
        Index("idx_account_role_status", "role", "status"),
    )