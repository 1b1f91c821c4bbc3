from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session
from fastapi import Request

def build_engine(database_url: str) -> Engine:
    if not database_url.startswith("sqlite"):
        return create_engine(database_url)

    # check_same_thread=False is needed only for SQLite
    connect_args = {"check_same_thread": False}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # one shared connection, otherwise every session sees an empty database
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)

def create_db_and_tables(engine: Engine):
    # registers the table models on SQLModel.metadata
    from ..models import Admin, Article  # noqa: F401
    SQLModel.metadata.create_all(engine)

def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
