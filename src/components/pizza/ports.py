"""
Pizza component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import PizzaEntry


class CatalogPort(Protocol):
    """Read-only source of catalog entries."""

    def list_entries(self) -> Sequence[PizzaEntry]:
        """List all entries in catalog order."""
        ...
