from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import RouteResult


class IMapRenderer(ABC):
    """Port for turning a route result into a map document."""

    @abstractmethod
    def render(self, result: RouteResult) -> str:
        """Return a standalone HTML document showing the route."""
