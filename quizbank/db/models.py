"""SQLAlchemy models for the question table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, JSON

from .session import Base


class QuestionRow(Base):
    """One question per row; ``position`` carries the collection order."""

    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, nullable=False, index=True)
    data = Column(JSON, nullable=True)
