"""SQLAlchemy models for persisted greetings."""
from __future__ import annotations

from sqlalchemy import Column, String, Text

from .session import Base


class GreetingMapping(Base):
    """Per-name greeting override: ``<fragment> <name>!``."""

    __tablename__ = "greeting"

    name = Column("firstpart", String(255), primary_key=True)
    fragment = Column("secondpart", Text, nullable=False)

    def __repr__(self) -> str:
        return f"GreetingMapping(name={self.name!r}, fragment={self.fragment!r})"
