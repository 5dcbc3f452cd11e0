"""Create the greeting schema; also run by the app at startup."""
from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers GreetingMapping on Base.metadata

logger = logging.getLogger(__name__)


def create_all() -> list[str]:
    """Create missing tables and return the names of the ones created."""
    engine = get_engine()
    existing = set(inspect(engine).get_table_names())
    missing = [table.name for table in Base.metadata.sorted_tables if table.name not in existing]
    Base.metadata.create_all(bind=engine)
    if missing:
        logger.info("Created tables %s", ", ".join(missing))
    return missing


if __name__ == "__main__":
    try:
        created = create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"Created: {', '.join(created)}" if created else "Schema already up to date.")
