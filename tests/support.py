"""Shared builders for the test suite."""

from fastapi.testclient import TestClient
from passlib.context import CryptContext

from app.auth.passwords import PasswordHasher
from app.core.settings import Settings
from app.main import create_app

TEST_SECRET = "unit-test-signing-secret-0123456789"

# same scheme as production, cheap parameters
FAST_CONTEXT = CryptContext(
    schemes=["argon2"],
    argon2__time_cost=1,
    argon2__memory_cost=1024,
    argon2__parallelism=1,
)


def make_settings(**overrides) -> Settings:
    values = {
        "JWT_SECRET": TEST_SECRET,
        "DATABASE_URL": "sqlite://",
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def fast_hasher(pepper: str = "") -> PasswordHasher:
    return PasswordHasher(pepper, context=FAST_CONTEXT)


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_client(settings: Settings | None = None) -> TestClient:
    """Application with an in-memory database. Use as a context manager."""
    settings = settings or make_settings()
    app = create_app(settings)
    app.state.password_hasher = fast_hasher(settings.PASSWORD_PEPPER)
    return TestClient(app)
