"""Geocoding of place names.

The geocoder is an injected dependency. Results are cached by place string
in a cache object owned by the caller, so repeated lookups of the same
birthplace across obituaries cost one request.
"""

import logging
import threading
from typing import Protocol

from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

from obituary_parser.schemas import GeoPoint

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    """Anything that can turn a place name into coordinates."""

    def geocode(self, place: str) -> GeoPoint | None: ...


class PlaceCache(Protocol):
    """Storage for geocoding results keyed by place string."""

    def get(self, place: str) -> GeoPoint | None: ...

    def put(self, place: str, point: GeoPoint) -> None: ...


class GeocodeCache:
    """In-memory, append-only geocode cache safe to share between threads."""

    def __init__(self):
        self._points: dict[str, GeoPoint] = {}
        self._lock = threading.Lock()

    def get(self, place: str) -> GeoPoint | None:
        with self._lock:
            return self._points.get(cache_key(place))

    def put(self, place: str, point: GeoPoint) -> None:
        with self._lock:
            self._points.setdefault(cache_key(place), point)

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

    def __contains__(self, place: str) -> bool:
        with self._lock:
            return cache_key(place) in self._points


class NominatimGeocoder:
    """Geocode places with OpenStreetMap's Nominatim service via geopy."""

    def __init__(
        self,
        user_agent: str = "obituary-parser",
        timeout: float = 10.0,
        cache: PlaceCache | None = None,
        client: Nominatim | None = None,
    ):
        """Initialize the geocoder.

        Args:
            user_agent: User agent Nominatim requires from every client
            timeout: Seconds to wait for each request
            cache: Cache for results (default: a fresh in-memory cache)
            client: Preconfigured geopy geocoder, mainly for tests
        """
        self.timeout = timeout
        self.cache = cache if cache is not None else GeocodeCache()
        self.client = client or Nominatim(user_agent=user_agent)

    def geocode(self, place: str) -> GeoPoint | None:
        """Look a place up, consulting the cache first.

        Args:
            place: Place name as written in the obituary

        Returns:
            The coordinates, or None if the place is unknown or the lookup failed
        """
        if not place or not place.strip():
            return None

        cached = self.cache.get(place)
        if cached is not None:
            return cached

        try:
            location = self.client.geocode(place.strip(), timeout=self.timeout)
        except GeopyError as e:
            logger.warning("Geocoding %r failed: %s", place, e)
            return None

        if location is None:
            logger.debug("No geocoding result for %r", place)
            return None

        point = GeoPoint(raw=place, latitude=location.latitude, longitude=location.longitude)
        self.cache.put(place, point)
        return point


def cache_key(place: str) -> str:
    """Normalize a place name for cache lookups."""
    return " ".join(place.lower().split())
