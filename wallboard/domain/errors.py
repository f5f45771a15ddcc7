"""
Error codes returned by wallboard use cases.

Callers switch on the code, never on the message text.
"""

from enum import Enum


class ErrorCode(str, Enum):
    # Account lifecycle
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_ROLE = "INVALID_ROLE"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"
    ROLE_TEAM_INCONSISTENT = "ROLE_TEAM_INCONSISTENT"
    IMMUTABLE_FIELD = "IMMUTABLE_FIELD"
    INVALID_TEAM = "INVALID_TEAM"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"

    # Login
    CODE_REQUIRED = "CODE_REQUIRED"
    INVALID_CODE = "INVALID_CODE"
    ACCOUNT_INACTIVE = "ACCOUNT_INACTIVE"
