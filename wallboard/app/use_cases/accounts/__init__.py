"""
Account Management Use Cases

Create, read, update and soft-delete wallboard accounts.
"""

from .create_account_use_case import CreateAccountUseCase
from .update_account_use_case import UpdateAccountUseCase
from .delete_account_use_case import DeleteAccountUseCase
from .get_account_use_case import GetAccountUseCase
from .list_accounts_use_case import ListAccountsUseCase
from .dtos import (
    AccountListResponse,
    AccountResponse,
    CreateAccountCommand,
    DeleteAccountResponse,
    UpdateAccountCommand,
)

__all__ = [
    # Use Cases
    "CreateAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
    "GetAccountUseCase",
    "ListAccountsUseCase",
    # DTOs - Commands
    "CreateAccountCommand",
    "UpdateAccountCommand",
    # DTOs - Responses
    "AccountResponse",
    "AccountListResponse",
    "DeleteAccountResponse",
]
