import os
from functools import lru_cache

from src.components.pizza import CatalogPort, StaticCatalog

_TRUTHY = {"1", "true", "yes", "on"}


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.log_level = os.environ.get("PIZZA_LOG_LEVEL", "INFO").upper()
        self.malformed_as_bad_request = (
            os.environ.get("PIZZA_MALFORMED_AS_BAD_REQUEST", "false").lower() in _TRUTHY
        )
        self.host = os.environ.get("PIZZA_HOST", "127.0.0.1")
        self.port = int(os.environ.get("PIZZA_PORT", "8000"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Catalog ---
# A new port per request; the catalog itself is rebuilt on every lookup.
def get_catalog() -> CatalogPort:
    return StaticCatalog()
