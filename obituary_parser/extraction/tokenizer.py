"""Turn a matched phrase into individual person records.

The cascade rules capture raw phrases such as
``"Ian (Terry) Girvan of Surrey, BC and Carol Girvan of Dartmouth, NS"``.
This module splits such phrases into entries and builds one
:class:`Person` per entry.
"""

import re

from obituary_parser.schemas import Person

# "Halifax, NS": the comma before a region code is part of the location
_REGION_COMMA_RE = re.compile(r"([A-Za-z]+),\s+([A-Z]{2})")
_PLACEHOLDER = "<<COMMA>>"

_AND_RE = re.compile(r"\s+and\s+")
_COMMA_RE = re.compile(r"\s*,\s*")
_NAME_SPLIT_RE = re.compile(r"\s*(?:,|\band\b)\s*", re.IGNORECASE)

# Entry shapes, most specific first
_SPOUSE_INSIDE_RE = re.compile(r"^(\w+)\s+\(([^)]+)\)\s+(\w+)\s+of\s+(.+)$")  # Ian (Terry) Girvan of Surrey, BC
_SPOUSE_AFTER_RE = re.compile(r"^(.+?)\s+\(([^)]+)\)\s+of\s+(.+)$")  # Gwen Steeves (Leslie) of Riverview, NB
_LOCATION_RE = re.compile(r"^(.+?)\s+of\s+(.+)$")  # Carol Girvan of Dartmouth, NS

_SKIP_RE = re.compile(r"^father-in-law\sto\s")
_STOP_RE = re.compile(r"^(?:devoted|loved)\s", re.IGNORECASE)

_SHARED_SURNAME_LIST_RE = re.compile(r"^((?:\w+\s*,\s*)+\w+),?\s*and\s+(\w+)\s+(\w+)$")
_SHARED_SURNAME_PAIR_RE = re.compile(r"^(\w+(?:\s*,\s*\w+)*)\s+and\s+(\w+)\s+(\w+)$")
_TRAILING_GRANDCHILDREN_RE = re.compile(r", and grandchildren.+")

# "sons, John, Paul and George, all of Halifax;"
_ALL_OF_RE = re.compile(r", all of (.+)$")
_CLAUSE_ITEM_RE = re.compile(r"([\w. ]+?),\s")
_PAIR_RE = re.compile(r"(\w+)\s+and\s+(\w+)")
# "sons, John, Halifax and Paul, Toronto;"
_CLAUSE_LOCATED_ITEM_RE = re.compile(r"([\w. ]+?),\s*([\w. ]+?)(?:\s+and|\Z)")


def split_entries(section: str) -> list[str]:
    """Split a list phrase on commas and "and", keeping region codes attached."""
    section = _AND_RE.sub(", ", section)
    section = _REGION_COMMA_RE.sub(rf"\1{_PLACEHOLDER}\2", section)
    return [entry.replace(_PLACEHOLDER, ", ").strip() for entry in _COMMA_RE.split(section)]


def parse_entry(entry: str) -> tuple[str, str, str]:
    """Split one list entry into ``(name, spouse, location)``.

    Missing parts come back as empty strings.
    """
    m = _SPOUSE_INSIDE_RE.match(entry)
    if m:
        return f"{m.group(1)} {m.group(3)}", m.group(2), m.group(4)
    m = _SPOUSE_AFTER_RE.match(entry)
    if m:
        return m.group(1), m.group(2), m.group(3)
    m = _LOCATION_RE.match(entry)
    if m:
        return m.group(1), "", m.group(2)
    return entry, "", ""


def build_person(**fields) -> Person | None:
    """Build a person, leaving out every blank field.

    Returns:
        The person, or None when the name is blank
    """
    fields = {key: value for key, value in fields.items() if value not in (None, "", [])}
    if not str(fields.get("name", "")).strip():
        return None
    return Person(**fields)


def extract_people_section(section: str | None, **extra) -> list[Person]:
    """Build person records from a captured list phrase.

    Narrative that follows a list ("devoted Grandma to ...", "loved ...")
    ends the list.

    Args:
        section: The raw phrase captured by a rule
        **extra: Fields to set on every person (sex, status)

    Returns:
        The people in the order they are named
    """
    if not section:
        return []

    people = []
    for entry in split_entries(section):
        name, spouse, location = parse_entry(entry)

        if not name:
            continue
        if _SKIP_RE.match(name):
            continue
        if _STOP_RE.match(name):
            break

        person = build_person(name=name, spouse=spouse, location=location, **extra)
        if person is not None:
            people.append(person)
    return people


def split_names(phrase: str | None) -> list[str]:
    """Split a phrase on commas and standalone "and", dropping blanks."""
    if not phrase:
        return []
    return [name.strip() for name in _NAME_SPLIT_RE.split(phrase) if name.strip()]


def names_from_phrase(phrase: str) -> list[str]:
    """Recover full names from a list that shares one surname.

    "Christopher, Thomas, and Marsha Cloud" gives three Clouds;
    anything else is split on commas and "and".
    """
    phrase = re.sub(r"[.;]", "", phrase).strip()

    m = _SHARED_SURNAME_LIST_RE.match(phrase)
    if m:
        firsts = _COMMA_RE.split(m.group(1)) + [m.group(2)]
        return [f"{first} {m.group(3)}" for first in firsts]

    m = _SHARED_SURNAME_PAIR_RE.match(phrase)
    if m:
        firsts = _COMMA_RE.split(m.group(1)) + [m.group(2)]
        return [f"{first} {m.group(3)}" for first in firsts]

    phrase = _TRAILING_GRANDCHILDREN_RE.sub("", phrase)
    return split_names(phrase)


def people_from_clause(clause: str, sex: str) -> list[Person]:
    """Build people from a "sons, ..." or "brothers, ..." clause.

    Two shapes are understood: names sharing one trailing location
    ("John, Paul and George, all of Halifax") and names each followed by
    their own location ("John, Halifax and Paul, Toronto").
    """
    people = []
    m = _ALL_OF_RE.search(clause)
    if m:
        location = m.group(1).strip()
        for item in _CLAUSE_ITEM_RE.finditer(clause):
            pair = _PAIR_RE.search(item.group(1))
            if pair:
                people.append(build_person(name=pair.group(1), location=location, sex=sex))
                people.append(build_person(name=pair.group(2), location=location, sex=sex))
                break
            people.append(build_person(name=item.group(1).strip(), location=location, sex=sex))
    else:
        for item in _CLAUSE_LOCATED_ITEM_RE.finditer(clause):
            people.append(
                build_person(
                    name=item.group(1).strip(), location=item.group(2).strip(), sex=sex
                )
            )
    return [person for person in people if person is not None]
