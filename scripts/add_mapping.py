#!/usr/bin/env python3
"""
Create or update a greeting mapping directly in the database.

Usage:
  python scripts/add_mapping.py --name Joe --fragment Hi [--update]
  python scripts/add_mapping.py --list
"""
from __future__ import annotations

import argparse

from greet_api.db.create_tables import create_all
from greet_api.services.greeting_service import (
    GreetingService,
    MappingExistsError,
    MappingNotFoundError,
)
from greet_api.core.config import get_settings
from greet_api.domain.greeting import GreetingProvider
from greet_api.repositories.sql_repository import GreetingRepository


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Manage greeting mappings")
    ap.add_argument("--name", help="Name to greet (primary key)")
    ap.add_argument("--fragment", help="Greeting used for that name (e.g. Hi)")
    ap.add_argument("--update", action="store_true", help="Update an existing mapping")
    ap.add_argument("--list", action="store_true", help="List all mappings")
    args = ap.parse_args(argv)

    create_all()
    repo = GreetingRepository()
    if args.list:
        for entity in repo.list_mappings():
            print(f"{entity.name}: {entity.fragment}")
        return

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("--name is required")
    if args.fragment is None:
        raise SystemExit("--fragment is required")

    svc = GreetingService(GreetingProvider(get_settings().app_greeting), repo)
    try:
        if args.update:
            svc.update_mapping(name, args.fragment)
        else:
            svc.create_mapping(name, args.fragment)
    except (MappingExistsError, MappingNotFoundError) as exc:
        raise SystemExit(exc.message) from exc
    print("OK: mapping saved")
    print(f"  {svc.get_greeting(name)['message']}")


if __name__ == "__main__":
    main()
