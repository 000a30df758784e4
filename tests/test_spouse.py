"""Tests for the spouse cascade."""

from obituary_parser.extraction.spouse import extract_spouse


class TestExtractSpouse:
    def test_late_spouse_with_year(self, record, resolver) -> None:
        text = "She was the wife of the late John Smith (1990)."
        (spouse,) = extract_spouse(text, record, resolver).spouse
        assert (spouse.name, spouse.death_year) == ("John Smith", 1990)

    def test_married_on(self, record, resolver) -> None:
        text = "He married Jane Doe, the love of his life, on June 5, 1960 in Halifax."
        (spouse,) = extract_spouse(text, record, resolver).spouse
        assert spouse.name == "Jane Doe"
        assert (spouse.married.date, spouse.married.place) == ("June 5, 1960", "Halifax")

    def test_husband_to_the_late(self, record, resolver) -> None:
        text = "Beloved husband to the late Margaret Jones."
        (spouse,) = extract_spouse(text, record, resolver).spouse
        assert (spouse.name, spouse.status) == ("Margaret Jones", "deceased")

    def test_wife_of(self, record, resolver) -> None:
        (spouse,) = extract_spouse("Anne, wife of Peter Green, died.", record, resolver).spouse
        assert spouse.name == "Peter Green"

    def test_survived_by_husband(self, record, resolver) -> None:
        text = "She is survived by her husband Paul, daughters Anna and Lucy."
        (spouse,) = extract_spouse(text, record, resolver).spouse
        assert (spouse.name, spouse.status, spouse.sex) == ("Paul", "living", "M")

    def test_survived_by_wife(self, record, resolver) -> None:
        text = "He is survived by his wife, Mary; sons John and David."
        (spouse,) = extract_spouse(text, record, resolver).spouse
        assert (spouse.name, spouse.status, spouse.sex) == ("Mary", "living", "F")

    def test_only_first_phrasing_used(self, record, resolver) -> None:
        text = "She was the wife of the late John Smith (1990). She is survived by her husband Paul."
        (spouse,) = extract_spouse(text, record, resolver).spouse
        assert spouse.name == "John Smith"

    def test_nothing_found(self, record, resolver) -> None:
        assert extract_spouse("He liked fishing.", record, resolver).spouse is None
