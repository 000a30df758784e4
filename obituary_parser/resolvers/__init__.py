"""Date and place resolution for extracted facts."""

from obituary_parser.resolvers.dates import DateParser, DateutilParser, format_ymd
from obituary_parser.resolvers.geocoding import (
    GeocodeCache,
    Geocoder,
    NominatimGeocoder,
    PlaceCache,
)
from obituary_parser.resolvers.resolver import Resolver

__all__ = [
    "DateParser",
    "DateutilParser",
    "GeocodeCache",
    "Geocoder",
    "NominatimGeocoder",
    "PlaceCache",
    "Resolver",
    "format_ymd",
]
