"""
Smoke tests for the GreetingRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from greet_api.db.models import GreetingMapping
from greet_api.db.session import transaction
from greet_api.repositories.sql_repository import GreetingRepository


def test_create_and_lookup_mapping(db_env):
    repo = GreetingRepository()
    assert repo.get_fragment("Joe") is None
    repo.create_mapping("Joe", "Hi")
    assert repo.get_fragment("Joe") == "Hi"


def test_update_mapping_in_place(db_env):
    repo = GreetingRepository()
    repo.create_mapping("Joe", "Hi")
    assert repo.update_mapping("Joe", "Yo") is True
    assert repo.get_fragment("Joe") == "Yo"
    assert [m.name for m in repo.list_mappings()] == ["Joe"]


def test_update_missing_mapping_returns_false(db_env):
    repo = GreetingRepository()
    assert repo.update_mapping("Unknown", "x") is False
    assert repo.get_fragment("Unknown") is None


def test_duplicate_name_raises_integrity_error(db_env):
    repo = GreetingRepository()
    repo.create_mapping("Joe", "Hi")
    with pytest.raises(IntegrityError):
        repo.create_mapping("Joe", "Hey")
    assert repo.get_fragment("Joe") == "Hi"


def test_transaction_rolls_back_on_error(db_env):
    repo = GreetingRepository()
    with pytest.raises(RuntimeError):
        with transaction() as session:
            session.add(GreetingMapping(name="Ann", fragment="Hey"))
            session.flush()
            raise RuntimeError("boom")
    assert repo.get_fragment("Ann") is None


def test_list_mappings_sorted_by_name(db_env):
    repo = GreetingRepository()
    repo.create_mapping("Zoe", "Ciao")
    repo.create_mapping("Ann", "Hey")
    mappings = repo.list_mappings()
    assert [(m.name, m.fragment) for m in mappings] == [("Ann", "Hey"), ("Zoe", "Ciao")]


def test_create_all_reports_created_tables(db_env):
    from greet_api.db import models
    from greet_api.db.create_tables import create_all
    from greet_api.db.session import get_engine

    models.Base.metadata.drop_all(bind=get_engine())
    assert create_all() == ["greeting"]
    assert create_all() == []
    assert GreetingRepository().get_fragment("Joe") is None
