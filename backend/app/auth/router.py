from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from ..core.settings import Settings
from .dependencies import get_auth_service, get_current_identity, get_settings
from .schemas import AdminProfile, AuthStatus, ChangePasswordRequest, LoginRequest, Message
from .service import AuthService, Identity
from .transport import attach_token, clear_token

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post(
    "/login",
    response_model=Message,
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Incorrect username or password"}},
)
async def login(
    login_data: LoginRequest,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Login with username and password. The access token is returned in an HTTP-only cookie.
    """
    result = auth_service.login(login_data.username, login_data.password, login_data.remember_me)
    attach_token(response, result.token, result.cookie)
    return Message(message="Login successful", code=status.HTTP_200_OK)


@router.post("/logout", response_model=Message)
async def logout(response: Response, settings: Annotated[Settings, Depends(get_settings)]):
    """
    Clear the session cookie. Tokens already issued stay valid until they expire.
    """
    clear_token(response, settings)
    return Message(message="Logged out successfully", code=status.HTTP_200_OK)


@router.get("/profile", response_model=AdminProfile, response_model_exclude_none=True)
async def get_profile(identity: Annotated[Identity, Depends(get_current_identity)]):
    """
    Identity carried by the current access token.
    """
    return AdminProfile(
        admin_id=identity.admin_id,
        username=identity.username,
        must_change_password=True if identity.must_change_password else None,
    )


@router.get("/checkAuthStatus", response_model=AuthStatus)
async def check_auth_status(identity: Annotated[Identity, Depends(get_current_identity)]):
    return AuthStatus(is_authenticated=True)


@router.post("/change-password", response_model=Message)
async def change_password(
    data: ChangePasswordRequest,
    response: Response,
    identity: Annotated[Identity, Depends(get_current_identity)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Change the current admin's password and replace the session token.
    """
    result = auth_service.change_password(identity, data.current_password, data.new_password)
    attach_token(response, result.token, result.cookie)
    return Message(message="Password changed successfully", code=status.HTTP_200_OK)
