"""
Pizza component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


# --- Catalog ---


@dataclass(frozen=True)
class PizzaEntry:
    """A named pizza with its price."""

    name: str
    price: int


# --- Request ---


class PizzaRequestPayload(BaseModel):
    """Deserialized request body. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", strict=True)

    pizza: str | None = None


# --- Errors ---


class PizzaErrorKind(Enum):
    """Recoverable lookup failures, each answered with a 400."""

    NO_PAYLOAD = "no_payload"
    NO_NAME_PROVIDED = "no_name_provided"
    NOT_FOUND = "not_found"
    MALFORMED_PAYLOAD = "malformed_payload"


ERROR_MESSAGES: dict[PizzaErrorKind, str] = {
    PizzaErrorKind.NO_PAYLOAD: "No payload provided",
    PizzaErrorKind.NO_NAME_PROVIDED: "No pizza name provided",
    PizzaErrorKind.NOT_FOUND: "Pizza not found",
    PizzaErrorKind.MALFORMED_PAYLOAD: "Malformed payload",
}


class MalformedPayloadError(ValueError):
    """Raised when a request body cannot be deserialized."""


# --- Response ---


@dataclass(frozen=True)
class PizzaResponse:
    """HTTP-style response produced by one invocation."""

    status_code: int
    body: str
    headers: dict[str, str] = field(
        default_factory=lambda: {"content-type": JSON_CONTENT_TYPE}
    )


# --- Shell Input/Output ---


@dataclass(frozen=True)
class PizzaLookupInput:
    """Input for a lookup. `payload` is None when no body was sent."""

    payload: PizzaRequestPayload | None


@dataclass(frozen=True)
class PizzaLookupOutput:
    """Output from a lookup: exactly one of `pizza` or `error` is set."""

    pizza: PizzaEntry | None
    error: PizzaErrorKind | None = None

    @property
    def success(self) -> bool:
        return self.pizza is not None

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return ERROR_MESSAGES[self.error]
