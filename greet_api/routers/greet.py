from __future__ import annotations

from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from greet_api.services.greeting_service import (
    GreetingService,
    GreetingError,
    InvalidFragmentError,
    MappingExistsError,
    MappingNotFoundError,
)

router = APIRouter(prefix="/greet", tags=["greet"])


class GreetingMessage(BaseModel):
    message: str


def _get_greeting_service(request: Request) -> GreetingService:
    svc = getattr(getattr(request.app, "state", None), "greeting_service", None)
    if not svc:
        raise RuntimeError("GreetingService not configured")
    return svc


def _content_charset(content_type: str, default: str = "utf-8") -> str:
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        value = value.strip().strip('"')
        if key.strip().lower() == "charset" and value:
            return value
    return default


async def _plain_text_body(request: Request) -> str:
    """Decode the body with the charset declared in Content-Type (utf-8 when absent)."""
    body = await request.body()
    charset = _content_charset(request.headers.get("content-type", ""))
    try:
        return body.decode(charset)
    except LookupError as exc:
        raise InvalidFragmentError(f"Unsupported charset {charset}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidFragmentError(f"Body is not valid {charset} text") from exc


@router.get("", response_model=GreetingMessage)
def get_default_message(svc: GreetingService = Depends(_get_greeting_service)):
    return svc.get_default_greeting()


@router.put("/greeting", status_code=204)
def update_greeting(
    payload: Any = Body(None),
    svc: GreetingService = Depends(_get_greeting_service),
):
    try:
        svc.set_default_greeting(payload)
    except GreetingError as exc:
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)
    return Response(status_code=204)


@router.get("/{name}", response_model=GreetingMessage)
def get_message(name: str, svc: GreetingService = Depends(_get_greeting_service)):
    return svc.get_greeting(name)


@router.post("/db/{name}", status_code=201)
def db_create_mapping(
    name: str,
    fragment: str = Depends(_plain_text_body),
    svc: GreetingService = Depends(_get_greeting_service),
):
    try:
        svc.create_mapping(name, fragment)
    except MappingExistsError as exc:
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return Response(status_code=201, headers={"Location": f"/greet/{quote(name)}"})


@router.put("/db/{name}")
def db_update_mapping(
    name: str,
    fragment: str = Depends(_plain_text_body),
    svc: GreetingService = Depends(_get_greeting_service),
):
    try:
        updated = svc.update_mapping(name, fragment)
    except MappingNotFoundError as exc:
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return PlainTextResponse(updated)
