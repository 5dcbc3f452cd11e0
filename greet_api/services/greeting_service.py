"""Greeting use cases (compose messages, change the default, manage mappings)."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError

from greet_api.domain.greeting import DEFAULT_WHO, GreetingProvider, format_message
from greet_api.repositories.sql_repository import GreetingRepository

logger = logging.getLogger(__name__)


class GreetingError(Exception):
    """Base exception for greeting workflow."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingGreetingError(GreetingError):
    """Raised when the request body lacks the ``greeting`` field."""

    def __init__(self) -> None:
        super().__init__("No greeting provided")


class InvalidGreetingError(GreetingError):
    """Raised when ``greeting`` is present but not a string."""

    def __init__(self) -> None:
        super().__init__("Greeting must be a string")


class InvalidFragmentError(GreetingError):
    """Raised when a mapping body cannot be decoded as text."""


class MappingNotFoundError(GreetingError):
    status_code = 404

    def __init__(self, name: str) -> None:
        super().__init__(f"Mapping for {name} not found")
        self.name = name


class MappingExistsError(GreetingError):
    status_code = 409

    def __init__(self, name: str) -> None:
        super().__init__(f"Mapping for {name} already exists")
        self.name = name


class GreetingService:
    """Composes greeting messages from the default greeting and stored mappings."""

    def __init__(self, provider: GreetingProvider, repository: GreetingRepository) -> None:
        self.provider = provider
        self.repository = repository

    def get_default_greeting(self) -> dict:
        return self.get_greeting(DEFAULT_WHO)

    def get_greeting(self, name: str) -> dict:
        fragment = self.repository.get_fragment(name)
        if fragment is None:
            greeting = self.provider.message
        else:
            logger.debug("Using stored greeting for %s", name)
            greeting = fragment
        return {"message": format_message(greeting, name)}

    def set_default_greeting(self, payload: Any) -> str:
        if not isinstance(payload, dict) or "greeting" not in payload:
            raise MissingGreetingError()
        new_greeting = payload["greeting"]
        if not isinstance(new_greeting, str):
            raise InvalidGreetingError()
        self.provider.set_message(new_greeting)
        logger.info("Default greeting changed to %r", new_greeting)
        return new_greeting

    def create_mapping(self, name: str, fragment: str) -> None:
        try:
            self.repository.create_mapping(name, fragment)
        except IntegrityError as exc:
            raise MappingExistsError(name) from exc
        logger.info("Created greeting mapping for %s", name)

    def update_mapping(self, name: str, fragment: str) -> str:
        if not self.repository.update_mapping(name, fragment):
            raise MappingNotFoundError(name)
        logger.info("Updated greeting mapping for %s", name)
        return name
