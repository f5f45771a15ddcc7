from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from wallboard.api.error import ClientError, ServerError
from wallboard.app.services.unit_of_work import UnitOfWork
from wallboard.app.use_cases.auth import LoginCommand, LoginResponse, LoginUseCase
from wallboard.depends import get_unit_of_work
from wallboard.domain.errors import ErrorCode

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Desktop clients send agent_code or supervisor_code; the admin panel
    sends username. The first non-empty one wins.
    """

    agent_code: str = Field("", description="Agent code (AGxxx)")
    supervisor_code: str = Field("", description="Supervisor code (SPxxx)")
    username: str = Field("", description="Any username")

    def code(self) -> str:
        return self.agent_code or self.supervisor_code or self.username


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Code Login

    Raises:
        - 400 Bad Request: CODE_REQUIRED
        - 401 Unauthorized: INVALID_CODE
        - 403 Forbidden: ACCOUNT_INACTIVE
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(LoginCommand(code=request.code()))

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.CODE_REQUIRED:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == ErrorCode.INVALID_CODE:
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == ErrorCode.ACCOUNT_INACTIVE:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value
