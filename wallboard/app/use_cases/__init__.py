"""
Use Cases

Organized into domain folders:
- accounts/: Account lifecycle
- auth/: Code login
"""

from .accounts import (
    CreateAccountUseCase,
    UpdateAccountUseCase,
    DeleteAccountUseCase,
    GetAccountUseCase,
    ListAccountsUseCase,
)
from .auth import LoginUseCase

__all__ = [
    # Accounts
    "CreateAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
    "GetAccountUseCase",
    "ListAccountsUseCase",
    # Auth
    "LoginUseCase",
]
