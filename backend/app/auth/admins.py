import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import ConflictError, InternalError
from ..models.Admin import Admin

logger = logging.getLogger(__name__)

class AdminStore:
    """Admin records, looked up by username or by store id."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_username(self, username: str) -> Admin | None:
        statement = select(Admin).where(Admin.username == username)
        return self.session.exec(statement).first()

    def find_by_id(self, admin_id: str) -> Admin | None:
        return self.session.get(Admin, admin_id)

    def create(self, username: str, password_hash: str, must_change_password: bool = False) -> Admin:
        admin = Admin(
            username=username,
            hashed_password=password_hash,
            must_change_password=must_change_password,
        )
        self._save(admin)
        logger.info("Created admin %s", username)
        return admin

    def update_password(self, admin: Admin, password_hash: str, must_change_password: bool = False) -> Admin:
        admin.hashed_password = password_hash
        admin.must_change_password = must_change_password
        admin.updated_at = datetime.now(timezone.utc)
        self._save(admin)
        return admin

    def _save(self, admin: Admin) -> None:
        self.session.add(admin)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.info("Username already exists: %s", admin.username)
            raise ConflictError("Username already exists") from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to save admin %s", admin.username)
            raise InternalError() from exc
        self.session.refresh(admin)
