"""
Wallboard Domain Entities

All domain entities organized by model.
"""

# Export all enums
from .enums import AccountRole, AccountStatus

# Export all entities
from .team import Team
from .account import Account

__all__ = [
    # Enums
    "AccountRole",
    "AccountStatus",
    # Entities
    "Team",
    "Account",
]
