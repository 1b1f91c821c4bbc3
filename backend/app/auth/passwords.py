import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__time_cost=2,
    argon2__memory_cost=102400,
    argon2__parallelism=8
)

class PasswordHasher:
    """One-way salted password hashing with an optional server-side pepper."""

    def __init__(self, pepper: str = "", context: CryptContext = pwd_context):
        self.pepper = pepper
        self.context = context

    def hash(self, password: str) -> str:
        return self.context.hash(password + self.pepper)

    def verify(self, password: str, hashed_password: str | None) -> bool:
        if not hashed_password:
            return False
        try:
            return self.context.verify(password + self.pepper, hashed_password)
        except (ValueError, TypeError):
            # stored value is not a hash this context understands
            logger.warning("Stored password hash could not be identified")
            return False
