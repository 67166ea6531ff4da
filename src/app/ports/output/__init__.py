from .gtfs_repository import IGtfsRepository
from .map_renderer import IMapRenderer

__all__ = [
    "IGtfsRepository",
    "IMapRenderer",
]
