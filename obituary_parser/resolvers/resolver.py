"""Adapter between the extraction rules and the date/place collaborators."""

import datetime as dt
import logging

from obituary_parser.resolvers.dates import DateParser, DateutilParser, format_ymd
from obituary_parser.resolvers.geocoding import Geocoder
from obituary_parser.schemas import GeoPoint

logger = logging.getLogger(__name__)


class Resolver:
    """Resolve date phrases and place names for the extraction rules.

    Collaborator failures never reach the rules: a phrase that cannot be
    resolved comes back as None and the dependent field is left out.
    """

    def __init__(self, date_parser: DateParser | None = None, geocoder: Geocoder | None = None):
        """Initialize the resolver.

        Args:
            date_parser: Date parser (default: dateutil-based)
            geocoder: Geocoder; places are not geocoded when omitted
        """
        self.date_parser = date_parser or DateutilParser()
        self.geocoder = geocoder

    def date(self, phrase: str | None) -> dt.date | None:
        if not phrase:
            return None
        try:
            return self.date_parser.parse(phrase)
        except Exception as e:
            logger.warning("Date parser failed on %r: %s", phrase, e)
            return None

    def ymd(self, phrase: str | None) -> str | None:
        """Resolve a date phrase to ``YYYY/MM/DD``."""
        value = self.date(phrase)
        return format_ymd(value) if value else None

    def locate(self, place: str | None) -> GeoPoint | None:
        if not place or self.geocoder is None:
            return None
        try:
            return self.geocoder.geocode(place)
        except Exception as e:
            logger.warning("Geocoder failed on %r: %s", place, e)
            return None
