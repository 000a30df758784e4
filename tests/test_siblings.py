"""Tests for sister, brother and sibling extraction."""

from obituary_parser.extraction.siblings import extract_brothers, extract_sisters
from obituary_parser.schemas import Person


class TestExtractSisters:
    def test_predeceased_sisters(self, record, resolver) -> None:
        text = "She was predeceased by her sisters, Ruth and Ann."
        sisters = extract_sisters(text, record, resolver).sisters
        assert [(s.name, s.status) for s in sisters] == [("Ruth", "deceased"), ("Ann", "deceased")]

    def test_sister_living(self, record, resolver) -> None:
        text = "He also leaves behind his sister Claire."
        sisters = extract_sisters(text, record, resolver).sisters
        assert [(s.name, s.status) for s in sisters] == [("Claire", "living")]

    def test_sister_mrs(self, record, resolver) -> None:
        text = "Survived by one sister, Mrs. Jane Doe of Halifax."
        sisters = extract_sisters(text, record, resolver).sisters
        assert [s.name for s in sisters] == ["Jane Doe"]

    def test_two_sisters(self, record, resolver) -> None:
        text = "He leaves two sisters, Mrs. Jane Doe, Halifax and Mrs. Ann Roe, Truro; and a brother."
        sisters = extract_sisters(text, record, resolver).sisters
        assert [(s.name, s.spouse.name, s.location) for s in sisters] == [
            ("Jane", "Doe", "Halifax"),
            ("Ann", "Roe", "Truro"),
        ]

    def test_sister_of_is_not_a_sister(self, record, resolver) -> None:
        assert extract_sisters("Jane was the sister of Tom and Bill.", record, resolver).sisters is None


class TestExtractBrothers:
    def test_predeceased_brothers(self, record, resolver) -> None:
        text = "He was predeceased by his brother, Tom."
        brothers = extract_brothers(text, record, resolver).brothers
        assert [(b.name, b.status) for b in brothers] == [("Tom", "deceased")]

    def test_brother_status_from_predeceased_phrase(self, record, resolver) -> None:
        text = "Predeceased by her parents and brother, Sam."
        brothers = extract_brothers(text, record, resolver).brothers
        assert [(b.name, b.status) for b in brothers] == [("Sam", "deceased")]

    def test_brother_appended_to_known(self, record, resolver) -> None:
        record = record.update(brothers=[Person(name="Bill")])
        brothers = extract_brothers("Survived by brother, Tom.", record, resolver).brothers
        assert [b.name for b in brothers] == ["Bill", "Tom"]

    def test_sister_of_gives_siblings(self, record, resolver) -> None:
        result = extract_brothers("Jane was the sister of Tom and Bill.", record, resolver)
        assert [s.name for s in result.siblings] == ["Tom", "Bill"]
        assert result.brothers is None

    def test_sister_of_ignored_when_sisters_known(self, record, resolver) -> None:
        record = record.update(sisters=[Person(name="Claire")])
        result = extract_brothers("Jane was the sister of Tom and Bill.", record, resolver)
        assert result.siblings is None

    def test_brothers_clause(self, record, resolver) -> None:
        text = "He leaves brothers, Tom, Halifax and Bill, Truro."
        brothers = extract_brothers(text, record, resolver).brothers
        assert [(b.name, b.location, b.sex) for b in brothers] == [
            ("Tom", "Halifax", "M"),
            ("Bill", "Truro", "M"),
        ]
