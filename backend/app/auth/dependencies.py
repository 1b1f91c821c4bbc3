from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from ..core.database import get_session
from ..core.settings import Settings
from .admins import AdminStore
from .passwords import PasswordHasher
from .service import AuthService, Identity
from .tokens import TokenService
from .transport import extract_token

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher

def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service

def get_admin_store(session: Session = Depends(get_session)) -> AdminStore:
    return AdminStore(session)

def get_auth_service(
    admins: Annotated[AdminStore, Depends(get_admin_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return AuthService(admins, hasher, tokens, settings)

def get_current_identity(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> Identity:
    """Identity named by the request's access token; 401 when absent or invalid."""
    return auth_service.authenticate(extract_token(request, settings))
