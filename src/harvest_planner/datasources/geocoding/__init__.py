"""Nominatim geocoding data source.

Public API:
  - search: search_location (place name -> Location)
  - client: API URL
"""

from harvest_planner.datasources.geocoding.client import NOMINATIM_API
from harvest_planner.datasources.geocoding.search import search_location

__all__ = ["NOMINATIM_API", "search_location"]
