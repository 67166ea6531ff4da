from .file_discovery import find_file_in_ancestors, locate_gtfs_file
from .local_gtfs_repository import LocalGtfsRepository

__all__ = [
    "LocalGtfsRepository",
    "find_file_in_ancestors",
    "locate_gtfs_file",
]
