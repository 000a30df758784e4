"""Shared fixtures for the obituary parser tests."""

import datetime as dt

import pytest

from obituary_parser.extraction import ObituaryExtractor
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord, GeoPoint

SCENARIO_A = (
    "She is survived by her husband Paul, daughters Anna and Lucy, "
    "and grandchildren Jake and Emma."
)
SCENARIO_B = (
    "He is survived by his wife Mary, sons John and David, and grandchildren "
    "Sophie, Liam, and Ava. His parents were George and Helen. He also leaves "
    "behind his sister Claire."
)
SCENARIO_C = "The weather was lovely today and the garden is in full bloom."


class FakeGeocoder:
    """Geocoder answering from a fixed table and recording every lookup."""

    def __init__(
        self,
        points: dict[str, tuple[float, float]] | None = None,
        error: Exception | None = None,
    ):
        self.points = points or {}
        self.error = error
        self.calls: list[str] = []

    def geocode(self, place: str) -> GeoPoint | None:
        self.calls.append(place)
        if self.error:
            raise self.error
        if place not in self.points:
            return None
        latitude, longitude = self.points[place]
        return GeoPoint(raw=place, latitude=latitude, longitude=longitude)


class FakeDateParser:
    """Date parser answering from a fixed table."""

    def __init__(self, dates: dict[str, dt.date] | None = None, error: Exception | None = None):
        self.dates = dates or {}
        self.error = error

    def parse(self, phrase: str) -> dt.date | None:
        if self.error:
            raise self.error
        return self.dates.get(phrase)


@pytest.fixture
def record() -> FamilyRecord:
    return FamilyRecord()


@pytest.fixture
def resolver() -> Resolver:
    return Resolver()


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder({"Halifax": (44.6488, -63.5752)})


@pytest.fixture
def geo_resolver(geocoder: FakeGeocoder) -> Resolver:
    return Resolver(geocoder=geocoder)


@pytest.fixture
def extractor() -> ObituaryExtractor:
    return ObituaryExtractor()
