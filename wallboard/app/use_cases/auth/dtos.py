"""
Authentication Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel, ConfigDict

from wallboard.app.use_cases.accounts.dtos import AccountResponse


class LoginCommand(BaseModel):
    """
    Login command - the code is the account username (AGxxx, SPxxx, ADxxx)
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    code: str


class LoginResponse(BaseModel):
    """Response for code login use case"""

    account: AccountResponse
