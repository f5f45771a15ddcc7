"""
Wallboard Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AccountRole(str, Enum):
    """Operator role on the wallboard"""

    agent = "Agent"
    supervisor = "Supervisor"
    admin = "Admin"


class AccountStatus(str, Enum):
    """Account status"""

    active = "Active"
    inactive = "Inactive"
