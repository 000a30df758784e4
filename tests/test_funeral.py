"""Tests for the funeral cascade."""

from obituary_parser.extraction.funeral import extract_funeral


class TestExtractFuneral:
    def test_location_date_time(self, record, resolver) -> None:
        text = "A funeral service will be held at St. Paul's Church, on Monday, at 2 pm."
        funeral = extract_funeral(text, record, resolver).funeral
        assert (funeral.location, funeral.date, funeral.time) == ("St. Paul's Church", "Monday", "2 pm")

    def test_loose_location_date_time(self, record, resolver) -> None:
        text = "Funeral Service at Oak Chapel on Wednesday at noon"
        funeral = extract_funeral(text, record, resolver).funeral
        assert (funeral.location, funeral.date, funeral.time) == ("Oak Chapel", "Wednesday", "noon")

    def test_time_then_place(self, record, resolver) -> None:
        text = "Funeral services will be held at 2 pm at Oak Chapel, with Rev. Smith officiating."
        funeral = extract_funeral(text, record, resolver).funeral
        assert (funeral.location, funeral.time, funeral.date) == ("Oak Chapel", "2 pm", None)

    def test_place_only(self, record, resolver) -> None:
        text = "Funeral services will be held at Oak Chapel, with Rev. Smith officiating."
        funeral = extract_funeral(text, record, resolver).funeral
        assert (funeral.location, funeral.time, funeral.date) == ("Oak Chapel", None, None)

    def test_nothing_found(self, record, resolver) -> None:
        assert extract_funeral("He liked fishing.", record, resolver) is record
