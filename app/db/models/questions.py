from __future__ import annotations

from sqlalchemy import JSON, BigInteger, Integer, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
QuestionIdType = BigInteger().with_variant(Integer(), "sqlite")
JsonMappingType = JSON().with_variant(JSONB(), "postgresql")


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(QuestionIdType, primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answers: Mapped[dict[str, str]] = mapped_column(JsonMappingType, nullable=False)
    correct: Mapped[dict[str, bool]] = mapped_column(JsonMappingType, nullable=False)
