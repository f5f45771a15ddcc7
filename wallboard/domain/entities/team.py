"""
Team Entity

A group of agents led by one or more supervisors.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class Team(SQLModel, table=True):
    """
    Team entity - referenced by accounts, never mutated by them.

    Accounts only depend on the foreign key to reject unknown team ids.
    """

    __tablename__ = "teams"

    id: Optional[int] = Field(default=None, primary_key=True)
    team_name: str = Field(unique=True, max_length=100)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
