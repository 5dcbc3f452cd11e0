"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from greet_api.db.models import GreetingMapping
from greet_api.db.session import get_session, transaction


class GreetingRepository:
    """CRUD helpers for greeting mappings.

    Writes run inside ``transaction()``: committed when the block exits
    normally, rolled back when it raises.
    """

    def get_fragment(self, name: str) -> Optional[str]:
        with get_session() as session:
            entity = session.get(GreetingMapping, name)
            return entity.fragment if entity is not None else None

    def create_mapping(self, name: str, fragment: str) -> None:
        """Insert a new mapping; a duplicate name raises ``IntegrityError`` on commit."""
        with transaction() as session:
            session.add(GreetingMapping(name=name, fragment=fragment))

    def update_mapping(self, name: str, fragment: str) -> bool:
        with transaction() as session:
            entity = session.get(GreetingMapping, name)
            if entity is None:
                return False
            entity.fragment = fragment
            return True

    def list_mappings(self) -> list[GreetingMapping]:
        with get_session() as session:
            stmt = select(GreetingMapping).order_by(GreetingMapping.name)
            return list(session.execute(stmt).scalars().all())
