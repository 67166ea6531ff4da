from __future__ import annotations

from src.adapters.maps.folium_map_renderer import FoliumMapRenderer
from src.adapters.persistence.local_gtfs_repository import LocalGtfsRepository
from src.app.ports.output import IMapRenderer
from src.app.services.route_resolver import RouteResolver
from src.app.services.stop_index import StopIndex


def get_stop_index() -> StopIndex:
    return StopIndex(gtfs_repository=LocalGtfsRepository())


def get_route_resolver() -> RouteResolver:
    return RouteResolver(gtfs_repository=LocalGtfsRepository())


def get_map_renderer() -> IMapRenderer:
    return FoliumMapRenderer()
