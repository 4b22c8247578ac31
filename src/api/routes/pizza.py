"""
Pizza lookup routes.

Key behaviors:
- The raw body and its content type are handed to the pizza component unparsed
- A missing or unsupported content type counts as no payload
- 200 with {"name", "price"} when found, 400 with {"error"} otherwise
- Malformed bodies fail hard unless PIZZA_MALFORMED_AS_BAD_REQUEST is set
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from src.api.deps import Settings, get_catalog, get_settings
from src.components.pizza import CatalogPort, PizzaResponse, handle_event

router = APIRouter()


def to_http_response(result: PizzaResponse) -> Response:
    """Convert a component response to a FastAPI response."""
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


@router.post("/", response_model=None)
@router.post("/pizza", response_model=None)
async def lookup_pizza(
    request: Request,
    catalog: CatalogPort = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Look up the price of the pizza named in the request body."""
    body = await request.body()
    result = handle_event(
        body or None,
        catalog,
        content_type=request.headers.get("content-type"),
        malformed_as_bad_request=settings.malformed_as_bad_request,
    )
    return to_http_response(result)
