import logging
from dataclasses import dataclass, field
from typing import Any

from ..core.errors import InvalidCredentials, Unauthorized
from ..core.settings import Settings
from ..models.Admin import Admin
from ..models.JWTAuthToken import MUST_CHANGE_PASSWORD_CLAIM
from .admins import AdminStore
from .passwords import PasswordHasher
from .tokens import TokenService
from .transport import CookiePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Who a validated token names. Lives for one request only."""

    admin_id: str
    username: str
    must_change_password: bool = False
    claims: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LoginResult:
    token: str
    cookie: CookiePolicy


class AuthService:
    """Credential verification, token issuance and token-based identification."""

    def __init__(
        self,
        admins: AdminStore,
        hasher: PasswordHasher,
        tokens: TokenService,
        settings: Settings,
    ):
        self.admins = admins
        self.hasher = hasher
        self.tokens = tokens
        self.settings = settings

    def login(self, username: str, password: str, remember_me: bool = False) -> LoginResult:
        admin = self.admins.find_by_username(username)
        # Same error for unknown user and wrong password
        if admin is None or not self.hasher.verify(password, admin.hashed_password):
            logger.info("Failed login for %s", username)
            raise InvalidCredentials()

        logger.info("Admin %s logged in", admin.username)
        return LoginResult(token=self._issue_for(admin), cookie=self.cookie_policy(remember_me))

    def authenticate(self, token: str | None) -> Identity:
        if not token:
            raise Unauthorized("Not authenticated")
        payload = self.tokens.validate(token)
        return Identity(
            admin_id=payload.sub,
            username=payload.username,
            must_change_password=payload.must_change_password,
            claims=payload.claims,
        )

    def change_password(self, identity: Identity, current_password: str, new_password: str) -> LoginResult:
        admin = self.admins.find_by_id(identity.admin_id)
        if admin is None:
            raise Unauthorized("Admin no longer exists")
        if not self.hasher.verify(current_password, admin.hashed_password):
            raise InvalidCredentials("Current password is incorrect")

        self.admins.update_password(admin, self.hasher.hash(new_password), must_change_password=False)
        logger.info("Admin %s changed password", admin.username)
        return LoginResult(token=self._issue_for(admin), cookie=self.cookie_policy(remember_me=False))

    def create_admin(self, username: str, password: str, must_change_password: bool = False) -> Admin:
        return self.admins.create(username, self.hasher.hash(password), must_change_password)

    def cookie_policy(self, remember_me: bool) -> CookiePolicy:
        return CookiePolicy(
            name=self.settings.COOKIE_NAME,
            http_only=True,
            secure=self.settings.COOKIE_SECURE,
            same_site=self.settings.COOKIE_SAMESITE,
            max_age=self.settings.REMEMBER_ME_MAX_AGE_SECONDS if remember_me else None,
        )

    def _issue_for(self, admin: Admin) -> str:
        extra = {MUST_CHANGE_PASSWORD_CLAIM: True} if admin.must_change_password else None
        return self.tokens.issue(admin.id, admin.username, extra)
