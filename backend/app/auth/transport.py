"""Carry access tokens between client and server.

Outbound, the token is set as an HTTP-only cookie. Inbound, it is read
from that cookie first and then, if enabled, from an
``Authorization: Bearer`` header.
"""

from dataclasses import dataclass

from fastapi import Request, Response

from ..core.settings import Settings


@dataclass(frozen=True)
class CookiePolicy:
    name: str
    http_only: bool = True
    secure: bool = False
    same_site: str = "strict"
    max_age: int | None = None  # None keeps it a browser-session cookie


def extract_token(request: Request, settings: Settings) -> str | None:
    token = request.cookies.get(settings.COOKIE_NAME)
    if token:
        return token

    if not settings.ACCEPT_BEARER_HEADER:
        return None
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credentials.strip():
        return None
    return credentials.strip()


def attach_token(response: Response, token: str, policy: CookiePolicy) -> None:
    response.set_cookie(
        key=policy.name,
        value=token,
        max_age=policy.max_age,
        httponly=policy.http_only,
        secure=policy.secure,
        samesite=policy.same_site,
    )


def clear_token(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
