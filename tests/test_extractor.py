"""End-to-end tests for the obituary extractor."""

import io
import re

import pytest
from pydantic import ValidationError

import obituary_parser
from obituary_parser.config import Settings
from obituary_parser.extraction import ObituaryExtractor
from obituary_parser.resolvers import GeocodeCache, NominatimGeocoder, Resolver
from obituary_parser.storage import SQLiteGeocodeCache

from tests.conftest import SCENARIO_A, SCENARIO_B, SCENARIO_C, FakeDateParser, FakeGeocoder

FULL_OBITUARY = (
    "John Doe, 84, of Halifax, passed away on March 3, 2020 at the residence, Halifax. "
    "Born in Truro, Nova Scotia on May 5, 1935, he was the son of the late James Doe "
    "and Mary (Smith) Doe. He is survived by his wife, Jane; "
    "as well as several nieces and nephews. "
    "A funeral service will be held at St. Paul's Church, on Monday, at 2 pm."
)


DIGIT_WORDS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def remove_commas(text: str) -> str:
    return text.replace(",", "")


def and_to_semicolon(text: str) -> str:
    return re.sub(r"\band\b", ";", text)


def append_clause(text: str) -> str:
    return text + " He will be sadly missed by all who knew him, and by his dog Rex."


def digits_to_words(text: str) -> str:
    return re.sub(r"\d", lambda m: DIGIT_WORDS[int(m.group())] + " ", text)


MUTATIONS = (remove_commas, and_to_semicolon, append_clause, digits_to_words)


def _names(people) -> list[str]:
    return [person.name for person in people]


class TestScenarios:
    def test_scenario_a(self, extractor) -> None:
        record = extractor.extract(SCENARIO_A)
        assert record.categories() == ["children", "grandchildren", "spouse"]
        assert _names(record.spouse) == ["Paul"]
        assert _names(record.children) == ["Anna", "Lucy"]
        assert _names(record.grandchildren) == ["Jake", "Emma"]

    def test_scenario_b(self, extractor) -> None:
        record = extractor.extract(SCENARIO_B)
        assert _names(record.spouse) == ["Mary"]
        assert _names(record.children) == ["John", "David"]
        assert _names(record.grandchildren) == ["Sophie", "Liam", "Ava"]
        assert (record.parents.father.name, record.parents.mother.name) == ("George", "Helen")
        assert _names(record.all_siblings()) == ["Claire"]

    def test_scenario_c(self, extractor) -> None:
        assert extractor.extract(SCENARIO_C) is None

    def test_full_obituary(self, extractor) -> None:
        record = extractor.extract(FULL_OBITUARY)
        assert (record.death.age, record.death.place) == (84, "Halifax")
        assert (record.birth.place, record.birth.date) == ("Truro", "1935/05/05")
        assert (record.parents.father.name, record.parents.mother.name) == ("James Doe", "Mary Smith")
        assert _names(record.spouse) == ["Jane"]
        assert _names(record.nieces_nephews) == ["several nieces and nephews"]
        assert record.funeral.location == "St. Paul's Church"


class TestProperties:
    @pytest.mark.parametrize("text", [SCENARIO_A, SCENARIO_B, FULL_OBITUARY])
    def test_idempotent(self, extractor, text) -> None:
        assert extractor.extract(text) == extractor.extract(text)

    @pytest.mark.parametrize("text", [SCENARIO_A, SCENARIO_B, FULL_OBITUARY])
    def test_truncated_input_never_crashes(self, extractor, text) -> None:
        for end in range(1, len(text) + 1):
            record = extractor.extract(text[:end])
            if record is not None:
                assert record.categories()

    @pytest.mark.parametrize("text", [SCENARIO_A, SCENARIO_B, FULL_OBITUARY])
    def test_deleted_character_never_crashes(self, extractor, text) -> None:
        for i in range(0, len(text), 3):
            extractor.extract(text[:i] + text[i + 1 :])

    @pytest.mark.parametrize("mutate", MUTATIONS, ids=lambda mutate: mutate.__name__)
    @pytest.mark.parametrize("text", [SCENARIO_A, SCENARIO_B, SCENARIO_C, FULL_OBITUARY])
    def test_rewritten_input_never_crashes(self, extractor, text, mutate) -> None:
        record = extractor.extract(mutate(text))
        assert record is None or record.categories()

    @pytest.mark.parametrize("text", [SCENARIO_A, SCENARIO_B, FULL_OBITUARY])
    def test_no_empty_categories(self, extractor, text) -> None:
        record = extractor.extract(text)
        for category in record.categories():
            value = getattr(record, category)
            if isinstance(value, list):
                assert value
            elif hasattr(value, "is_empty"):
                assert not value.is_empty()

    @pytest.mark.parametrize("age", [0, 45, 109, 110, 150, 999])
    def test_age_below_limit(self, extractor, age) -> None:
        record = extractor.extract(f"Jane Roe, {age}, of Truro, passed away on May 1, 2021.")
        if age < 110:
            assert record.death.age == age
        else:
            assert record.death.age is None


class TestExtractor:
    def test_file_like_input(self, extractor) -> None:
        record = extractor.extract(io.StringIO(SCENARIO_A))
        assert _names(record.spouse) == ["Paul"]

    def test_invalid_input(self, extractor) -> None:
        with pytest.raises(ValidationError):
            extractor.extract("")
        with pytest.raises(ValidationError):
            extractor.extract("x" * 5001)

    def test_extract_batch(self, extractor) -> None:
        results = extractor.extract_batch([SCENARIO_A, SCENARIO_C])
        assert results[0] is not None
        assert results[1] is None

    def test_module_level_extract(self) -> None:
        record = obituary_parser.extract(SCENARIO_A)
        assert _names(record.children) == ["Anna", "Lucy"]
        assert obituary_parser.ValidationError is ValidationError


class TestFromSettings:
    def test_geocoding_off_by_default(self) -> None:
        extractor = ObituaryExtractor.from_settings(Settings(geocode_enabled=False))
        assert extractor.resolver.geocoder is None

    def test_in_memory_cache(self) -> None:
        extractor = ObituaryExtractor.from_settings(Settings(geocode_enabled=True))
        assert isinstance(extractor.resolver.geocoder, NominatimGeocoder)
        assert isinstance(extractor.resolver.geocoder.cache, GeocodeCache)

    def test_sqlite_cache(self, tmp_path) -> None:
        config = Settings(geocode_enabled=True, geocode_cache_db=tmp_path / "geo.db")
        extractor = ObituaryExtractor.from_settings(config)
        assert isinstance(extractor.resolver.geocoder.cache, SQLiteGeocodeCache)

    def test_shared_cache(self) -> None:
        cache = GeocodeCache()
        first = ObituaryExtractor.from_settings(Settings(geocode_enabled=True), cache=cache)
        second = ObituaryExtractor.from_settings(Settings(geocode_enabled=True), cache=cache)
        assert first.resolver.geocoder.cache is second.resolver.geocoder.cache


class TestFailingCollaborators:
    def test_failures_only_drop_dependent_fields(self) -> None:
        resolver = Resolver(
            date_parser=FakeDateParser(error=ValueError("bad date")),
            geocoder=FakeGeocoder(error=RuntimeError("service down")),
        )
        extractor = ObituaryExtractor(resolver=resolver)

        text = "Born in Halifax on May 5 1935. She passed away on March 3, 2020."
        record = extractor.extract(text)

        assert record.birth.place == "Halifax"
        assert record.birth.location is None
        assert record.birth.date is None
        assert record.death.date == "March 3, 2020"
        assert record.death.datetime is None
        assert resolver.geocoder.calls == ["Halifax"]
