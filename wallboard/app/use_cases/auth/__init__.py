"""
Authentication Use Cases

Code-based login for wallboard operators.
"""

from .login_use_case import LoginUseCase
from .dtos import LoginCommand, LoginResponse

__all__ = [
    "LoginUseCase",
    "LoginCommand",
    "LoginResponse",
]
