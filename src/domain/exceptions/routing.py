class RoutingError(Exception):
    """Base exception for route lookup failures."""


class GtfsDataUnavailable(RoutingError):
    """Raised when a GTFS data file cannot be located or opened."""

    def __init__(self, name: str, detail: str | None = None) -> None:
        msg = f"GTFS file '{name}' is not available"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.name = name
