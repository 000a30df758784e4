"""Sisters, brothers and siblings of the deceased.

Sisters are read first, brothers second; the generic "sister of A and B"
phrase only applies when neither step found anyone.
"""

import re

from obituary_parser.extraction.tokenizer import (
    build_person,
    extract_people_section,
    people_from_clause,
)
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord, Person

_LEADING_COMMA_RE = re.compile(r"^,\s+")

_PREDECEASED_SISTERS_RE = re.compile(
    r"predeceased by (?:his|her) sisters?\s*([^;.]+);?", re.IGNORECASE
)
_SISTER_RE = re.compile(r"\bsister[,\s]\s*([A-Z][a-z]+(?:\s+[A-Z][a-z.]+)*)(?:,\s*([A-Z][a-z]+))?")
_SISTER_MRS_RE = re.compile(r" sister,\s*Mrs\.\s+([A-Z][a-zA-Z]+\s+[A-Z][a-zA-Z]+)")
_TWO_SISTERS_RE = re.compile(r"\stwo\ssisters,\s*(.*?)\sand\s(.*?)[;:]", re.DOTALL)
_MRS_LOCATION_RE = re.compile(r"Mrs\.\s(.+?),\s(.+)")
_TWO_WORDS_RE = re.compile(r"(\w+)\s+(\w+)")

_PREDECEASED_BROTHERS_RE = re.compile(
    r"predeceased by (?:his|her) brothers?\s*([^;.]+);?", re.IGNORECASE
)
_BROTHER_RE = re.compile(r"\bbrother,\s*([A-Z][a-z]+(?:\s+[A-Z][a-z.]+)*)(?:,\s*([A-Z][a-z]+))?")
_SISTER_OF_RE = re.compile(r"sister of ([a-z]+) and ([a-z]+)", re.IGNORECASE)
_BROTHERS_CLAUSE_RE = re.compile(r"\sbrothers,\s*(.*?)[;.]", re.DOTALL)


def _status(text: str, name: str) -> str:
    """Whether the obituary says the deceased was predeceased by this sibling."""
    if re.search(r"\bpredeceased by.*?" + re.escape(name), text, re.IGNORECASE):
        return "deceased"
    return "living"


def _predeceased(m: re.Match[str]) -> list[Person]:
    section = _LEADING_COMMA_RE.sub("", m.group(1))
    return extract_people_section(section, status="deceased")


def _sister_from_two_sisters(sister: str) -> Person | None:
    m = _MRS_LOCATION_RE.search(sister)
    if not m:
        return build_person(name=sister.strip(), sex="F")

    name, location = m.group(1), m.group(2).strip()
    names = _TWO_WORDS_RE.search(name)
    if names:
        return build_person(
            name=names.group(1),
            location=location,
            sex="F",
            spouse=Person(name=names.group(2), sex="M"),
        )
    return build_person(name=name, location=location, sex="F")


def extract_sisters(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find the sisters, marking each one living or deceased."""
    m = _PREDECEASED_SISTERS_RE.search(text)
    if m:
        return record.update(sisters=_predeceased(m) or None)

    sisters = []
    mentioned = False
    for m in _SISTER_RE.finditer(text):
        mentioned = True
        name = m.group(1)
        if name == "Mrs":
            mrs = _SISTER_MRS_RE.search(text)
            name = mrs.group(1) if mrs else None
        if name:
            sisters.append(Person(name=name, status=_status(text, name)))

    if not mentioned:
        m = _TWO_SISTERS_RE.search(text)
        if m:
            sisters = [_sister_from_two_sisters(m.group(1)), _sister_from_two_sisters(m.group(2))]
            sisters = [sister for sister in sisters if sister is not None]

    return record.update(sisters=sisters or None)


def extract_brothers(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find the brothers; fall back to unsexed siblings when no sibling is known."""
    m = _PREDECEASED_BROTHERS_RE.search(text)
    if m:
        return record.update(brothers=_predeceased(m) or None)

    brothers = list(record.brothers or [])
    for m in _BROTHER_RE.finditer(text):
        brothers.append(Person(name=m.group(1), status=_status(text, m.group(1))))

    changes = {}
    if not (brothers or record.sisters or record.siblings):
        m = _SISTER_OF_RE.search(text)
        if m:
            changes["siblings"] = [Person(name=m.group(1)), Person(name=m.group(2))]

    if not brothers:
        m = _BROTHERS_CLAUSE_RE.search(text)
        if m:
            brothers = people_from_clause(m.group(1), sex="M")

    changes["brothers"] = brothers or None
    return record.update(**changes)
