import logging

from sqlalchemy.engine import Engine
from sqlmodel import Session

from .settings import Settings
from ..auth.admins import AdminStore
from ..auth.passwords import PasswordHasher
from ..models.Admin import Admin

logger = logging.getLogger(__name__)

def create_admin(engine: Engine, settings: Settings, username: str, password: str,
                 must_change_password: bool = False) -> Admin:
    """Provision an admin directly in the store. Raises ConflictError on duplicates."""
    hasher = PasswordHasher(settings.PASSWORD_PEPPER)
    with Session(engine) as session:
        store = AdminStore(session)
        return store.create(username, hasher.hash(password), must_change_password)

def seed_admin(engine: Engine, settings: Settings) -> Admin | None:
    """
    Create the initial admin from INIT_ADMIN_USERNAME / INIT_ADMIN_PASSWORD.
    Returns None when it already exists.
    """
    username = settings.INIT_ADMIN_USERNAME
    password = settings.INIT_ADMIN_PASSWORD
    if not username or not password:
        raise ValueError("INIT_ADMIN_USERNAME and INIT_ADMIN_PASSWORD must be set")

    with Session(engine) as session:
        if AdminStore(session).find_by_username(username):
            logger.info("Admin %s already exists, skipping", username)
            return None

    logger.info("Creating initial admin user: %s", username)
    return create_admin(engine, settings, username, password)
