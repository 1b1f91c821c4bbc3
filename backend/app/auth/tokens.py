"""Signed, time-limited access tokens."""

import logging
import time
from typing import Any, Callable
from uuid import uuid4

from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import Unauthorized
from ..core.settings import Settings
from ..models.JWTAuthToken import (
    MUST_CHANGE_PASSWORD_CLAIM,
    SUBJECT_CLAIM,
    USERNAME_CLAIM,
    TokenPayload,
)

logger = logging.getLogger(__name__)

RESERVED_CLAIMS = frozenset({SUBJECT_CLAIM, USERNAME_CLAIM, "exp", "iat", "jti"})


class TokenService:
    """Issue and validate JWTs signed with the server secret.

    Validation is self-contained: it never looks the subject up in the
    credential store.
    """

    def __init__(self, settings: Settings, clock: Callable[[], float] = time.time):
        self.secret = settings.JWT_SECRET
        self.algorithm = settings.JWT_ALGORITHM
        self.lifetime_seconds = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
        self.clock = clock

    def issue(self, subject_id: str, username: str, extra_claims: dict[str, Any] | None = None) -> str:
        """Sign a token naming ``subject_id`` and ``username``."""
        claims = dict(extra_claims or {})
        clashing = RESERVED_CLAIMS.intersection(claims)
        if clashing:
            raise ValueError(f"Reserved claims cannot be overridden: {sorted(clashing)}")

        issued_at = int(self.clock())
        claims.update({
            SUBJECT_CLAIM: str(subject_id),
            USERNAME_CLAIM: username,
            "iat": issued_at,
            "exp": issued_at + self.lifetime_seconds,
            "jti": uuid4().hex,
        })
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def validate(self, token: str) -> TokenPayload:
        """Return the payload of a valid token, raise ``Unauthorized`` otherwise."""
        try:
            # expiry is checked below against the injected clock
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            raise Unauthorized() from exc

        try:
            payload = TokenPayload(
                sub=claims[SUBJECT_CLAIM],
                username=claims[USERNAME_CLAIM],
                exp=claims["exp"],
                iat=claims["iat"],
                jti=claims.get("jti"),
                must_change_password=claims.get(MUST_CHANGE_PASSWORD_CLAIM) is True,
                claims={name: value for name, value in claims.items() if name not in RESERVED_CLAIMS},
            )
        except (KeyError, PydanticValidationError) as exc:
            logger.debug("Rejected token with malformed claims: %s", exc)
            raise Unauthorized() from exc

        # valid strictly before exp
        if self.clock() >= payload.exp:
            logger.debug("Rejected expired token for %s", payload.username)
            raise Unauthorized("Token has expired")
        return payload
