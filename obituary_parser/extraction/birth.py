"""Birth facts of the deceased.

The date resolver normalises birth dates to ``YYYY/MM/DD``; the "born in
PLACE on DATE" phrasing also sends the place to the geocoder. The "was born
... to FATHER and MOTHER" phrasing names the parents as well.
"""

import re

from obituary_parser.extraction.parents import unwrap_maiden_name
from obituary_parser.extraction.tokenizer import build_person
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import Birth, FamilyRecord, Parents

_BORN_IN_PLACE_DATE_RE = re.compile(
    r"\bBorn in ([^,]+),.*?\b(?:on\s+)?([A-Z][a-z]+ \d{1,2}, \d{4})", re.IGNORECASE
)
_BORN_IN_ON_RE = re.compile(r"\bBorn in ([a-z,.\s]+)\s+on\s+(.+)", re.IGNORECASE)
_BORN_TO_RE = re.compile(
    r"S?he was born (.+)\sin ([a-z,.\s]+)\s+to\s+(.+?)\sand\s(.+?)\.", re.IGNORECASE
)
_BORN_ON_RE = re.compile(
    r"\bS?he was born\s*(?:on\s+)?([A-Z][a-z]+ \d{1,2}, \d{4})(?:[,\s]+in\s+([^,.]+))?",
    re.IGNORECASE,
)
_FATHER_CLAUSE_END_RE = re.compile(r"(.+?)\.\s\s")
_SURVIVING_PARENT_RE = re.compile(r"survived by (?:his|her) (father|mother)[\s,;]", re.IGNORECASE)


def _born_to(m: re.Match[str], text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    birth = Birth(place=m.group(2).strip(), date=resolver.ymd(m.group(1)))

    father = m.group(3)
    cut = _FATHER_CLAUSE_END_RE.search(father)
    if cut:
        father = cut.group(1)

    father = build_person(name=father.strip())
    mother = build_person(name=unwrap_maiden_name(m.group(4)).strip())
    if father is None or mother is None:
        return record.update(birth=birth)

    surviving = _SURVIVING_PARENT_RE.search(text)
    if surviving:
        role = surviving.group(1).lower()
        parent = father if role == "father" else mother
        parent = parent.model_copy(update={"status": "living"})
        if role == "father":
            father = parent
        else:
            mother = parent

    return record.update(birth=birth, parents=Parents(father=father, mother=mother))


def extract_birth(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find where and when the deceased was born."""
    m = _BORN_IN_PLACE_DATE_RE.search(text)
    if m:
        birth = Birth(place=m.group(1), date=resolver.ymd(m.group(2)) or m.group(2))
        return record.update(birth=birth)

    m = _BORN_IN_ON_RE.search(text)
    if m:
        place = m.group(1).rstrip()
        birth = Birth(place=place, location=resolver.locate(place), date=resolver.ymd(m.group(2)))
        return record.update(birth=birth)

    m = _BORN_TO_RE.search(text)
    if m:
        return _born_to(m, text, record, resolver)

    m = _BORN_ON_RE.search(text)
    if m:
        place = m.group(2).strip() if m.group(2) else None
        return record.update(birth=Birth(place=place, date=resolver.ymd(m.group(1))))

    return record
