from datetime import datetime, timezone
from uuid import uuid4

from sqlmodel import Field, SQLModel

def _new_id() -> str:
    return uuid4().hex

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

# ==========================================
# SQLModel (Database Entity)
# ==========================================
class Admin(SQLModel, table=True):
    __tablename__ = "admins"

    id: str = Field(default_factory=_new_id, primary_key=True)
    username: str = Field(unique=True, index=True, nullable=False)
    hashed_password: str = Field(nullable=False)
    must_change_password: bool = Field(default=False)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
