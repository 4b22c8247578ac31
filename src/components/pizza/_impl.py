"""
Pizza lookup - Catalog, lookup, request interpretation and response building.

Functional Core - pure business logic.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from urllib.parse import parse_qs

from pydantic import ValidationError

from .models import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    MalformedPayloadError,
    PizzaEntry,
    PizzaErrorKind,
    PizzaRequestPayload,
    PizzaResponse,
)

# --- Catalog ---


def build_catalog() -> tuple[PizzaEntry, ...]:
    """Build the pizza catalog."""
    return (
        PizzaEntry(name="veggie", price=10),
        PizzaEntry(name="hawaiian", price=12),
        PizzaEntry(name="pepperoni", price=11),
    )


def find_pizza(name: str, catalog: Sequence[PizzaEntry]) -> PizzaEntry | None:
    """Return the first entry named exactly `name`, or None."""
    return next((entry for entry in catalog if entry.name == name), None)


# --- Request Interpretation ---


def _media_type(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


def _is_json(media_type: str) -> bool:
    return media_type == JSON_CONTENT_TYPE or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


def _decode_form(body: str | bytes) -> PizzaRequestPayload:
    try:
        text = body.decode("utf-8") if isinstance(body, bytes) else body
    except UnicodeDecodeError as e:
        raise MalformedPayloadError("Form body is not valid UTF-8") from e

    # Repeated keys keep their first value
    fields = {key: values[0] for key, values in parse_qs(text).items()}
    return PizzaRequestPayload.model_validate(fields)


def parse_payload(
    body: str | bytes | None,
    content_type: str | None = JSON_CONTENT_TYPE,
) -> PizzaRequestPayload | None:
    """
    Deserialize a raw request body according to its content type.

    JSON and urlencoded form bodies are decoded. Returns None when no body
    was sent, or when the content type is missing or neither of those.
    Raises MalformedPayloadError when a JSON body is not an object with a
    string `pizza`.
    """
    if body is None or len(body) == 0 or content_type is None:
        return None

    media_type = _media_type(content_type)

    try:
        if _is_json(media_type):
            return PizzaRequestPayload.model_validate_json(body)
        if media_type == FORM_CONTENT_TYPE:
            return _decode_form(body)
    except ValidationError as e:
        raise MalformedPayloadError(
            f"Request body is not a valid pizza payload: {e.error_count()} error(s)"
        ) from e

    return None


def interpret_payload(
    payload: PizzaRequestPayload | None,
) -> str | PizzaErrorKind:
    """Extract the requested pizza name, or the reason there is none."""
    if payload is None:
        return PizzaErrorKind.NO_PAYLOAD
    if not payload.pizza:
        return PizzaErrorKind.NO_NAME_PROVIDED
    return payload.pizza


# --- Response Building ---


def _dump(content: dict[str, object]) -> str:
    return json.dumps(content, separators=(",", ":"), ensure_ascii=False)


def build_success_response(entry: PizzaEntry) -> PizzaResponse:
    """Render a found pizza as a 200 response."""
    return PizzaResponse(
        status_code=200,
        body=_dump({"name": entry.name, "price": entry.price}),
    )


def build_failure_response(message: str) -> PizzaResponse:
    """Render an error message as a 400 response."""
    return PizzaResponse(status_code=400, body=_dump({"error": message}))
