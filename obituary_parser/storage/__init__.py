"""Storage module for persistent caches."""

from obituary_parser.storage.sqlite import GeocodedPlace, SQLiteGeocodeCache

__all__ = ["GeocodedPlace", "SQLiteGeocodeCache"]
