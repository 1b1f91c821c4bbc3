from typing import Any

from sqlmodel import Field, SQLModel

# Claim names as they appear inside the signed token
SUBJECT_CLAIM = "sub"
USERNAME_CLAIM = "username"
MUST_CHANGE_PASSWORD_CLAIM = "mustChangePassword"

class TokenPayload(SQLModel):
    sub: str # Admin ID
    username: str
    exp: int # Expiration time
    iat: int # Issued at time
    jti: str | None = None # Token ID
    must_change_password: bool = False
    claims: dict[str, Any] = Field(default_factory=dict) # extra claims given at issue time
