"""
Pizza component - Price lookup over a fixed pizza catalog.
"""

from ._impl import (
    build_catalog,
    build_failure_response,
    build_success_response,
    find_pizza,
    interpret_payload,
    parse_payload,
)
from .component import StaticCatalog, handle_event, run_lookup
from .models import (
    ERROR_MESSAGES,
    MalformedPayloadError,
    PizzaEntry,
    PizzaErrorKind,
    PizzaLookupInput,
    PizzaLookupOutput,
    PizzaRequestPayload,
    PizzaResponse,
)
from .ports import CatalogPort

__all__ = [
    # Entry points
    "run_lookup",
    "handle_event",
    # Functional core
    "build_catalog",
    "find_pizza",
    "parse_payload",
    "interpret_payload",
    "build_success_response",
    "build_failure_response",
    # Models
    "PizzaEntry",
    "PizzaRequestPayload",
    "PizzaErrorKind",
    "PizzaResponse",
    "PizzaLookupInput",
    "PizzaLookupOutput",
    "MalformedPayloadError",
    "ERROR_MESSAGES",
    # Ports
    "CatalogPort",
    "StaticCatalog",
]
