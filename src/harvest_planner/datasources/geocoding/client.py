"""Nominatim (OpenStreetMap) geocoder constants.

API docs: https://nominatim.org/release-docs/latest/api/Search/
"""

NOMINATIM_API = "https://nominatim.openstreetmap.org/search"

# Language for returned place names
ACCEPT_LANGUAGE = "en"
