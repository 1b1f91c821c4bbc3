from datetime import datetime

from sqlmodel import Field, SQLModel

from .Admin import _new_id, _utcnow

class Article(SQLModel, table=True):
    __tablename__ = "articles"

    id: str = Field(default_factory=_new_id, primary_key=True)
    title: str = Field(nullable=False)
    content: str = Field(nullable=False)
    published: bool = Field(default=False)
    created_at: datetime = Field(default_factory=_utcnow, index=True)
    updated_at: datetime = Field(default_factory=_utcnow)
