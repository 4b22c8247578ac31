"""
Pizza component - Price lookup over a fixed pizza catalog.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ._impl import (
    build_catalog,
    build_failure_response,
    build_success_response,
    find_pizza,
    interpret_payload,
    parse_payload,
)
from .models import (
    ERROR_MESSAGES,
    JSON_CONTENT_TYPE,
    MalformedPayloadError,
    PizzaEntry,
    PizzaErrorKind,
    PizzaLookupInput,
    PizzaLookupOutput,
    PizzaResponse,
)
from .ports import CatalogPort

logger = logging.getLogger(__name__)


class StaticCatalog:
    """Catalog port backed by the built-in pizza list."""

    def list_entries(self) -> Sequence[PizzaEntry]:
        return build_catalog()


# --- Shell Layer Functions ---


def run_lookup(
    input_data: PizzaLookupInput,
    catalog: CatalogPort,
) -> PizzaLookupOutput:
    """Resolve a request payload to a catalog entry."""
    name = interpret_payload(input_data.payload)
    if isinstance(name, PizzaErrorKind):
        return PizzaLookupOutput(pizza=None, error=name)

    pizza = find_pizza(name, catalog.list_entries())
    if pizza is None:
        return PizzaLookupOutput(pizza=None, error=PizzaErrorKind.NOT_FOUND)

    return PizzaLookupOutput(pizza=pizza)


def handle_event(
    body: str | bytes | None,
    catalog: CatalogPort | None = None,
    *,
    content_type: str | None = JSON_CONTENT_TYPE,
    malformed_as_bad_request: bool = False,
) -> PizzaResponse:
    """
    Handle one inbound request body end to end.

    Args:
        body: Raw request body, None if the request had none
        catalog: Catalog port (a fresh StaticCatalog if None)
        content_type: Request content type; bodies that are neither JSON
            nor urlencoded form count as no payload
        malformed_as_bad_request: Answer undecodable bodies with a 400
            instead of raising

    Returns:
        Exactly one response, 200 with the pizza or 400 with an error

    Raises:
        MalformedPayloadError: If the body cannot be decoded and
            malformed_as_bad_request is False
    """
    port = catalog if catalog is not None else StaticCatalog()

    try:
        payload = parse_payload(body, content_type)
    except MalformedPayloadError as e:
        logger.warning("Rejected malformed payload: %s", e)
        if not malformed_as_bad_request:
            raise
        return build_failure_response(ERROR_MESSAGES[PizzaErrorKind.MALFORMED_PAYLOAD])

    result = run_lookup(PizzaLookupInput(payload=payload), port)

    if result.pizza is not None:
        logger.info("Found pizza %s (price %d)", result.pizza.name, result.pizza.price)
        return build_success_response(result.pizza)

    logger.info("Lookup failed: %s", result.error_message)
    return build_failure_response(result.error_message or "")
