from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.api.routes import health as health_routes
from app.api.routes import questions as questions_routes
from app.db.models.base import Base


def _prepare_schema(db_path: Path) -> None:
    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()


@pytest.fixture
def sqlite_session_factory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> async_sessionmaker:
    db_path = tmp_path / "questions.db"
    _prepare_schema(db_path)
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    monkeypatch.setattr(questions_routes, "SessionLocal", factory)
    monkeypatch.setattr(health_routes, "SessionLocal", factory)
    return factory
