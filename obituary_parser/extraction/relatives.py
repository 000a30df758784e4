"""Nieces and nephews, children-in-law and aunts."""

import re

from obituary_parser.extraction.rules import Template, first_value
from obituary_parser.extraction.tokenizer import build_person, split_names
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord, Person

# Only this literal phrase is recognised; nieces and nephews are never named
_SEVERAL_NIECES_RE = re.compile(r"as well as several nieces and nephews", re.IGNORECASE)
SEVERAL_NIECES_AND_NEPHEWS = "several nieces and nephews"

_AUNT_RE = re.compile(r"niece of\s+([A-Za-z]+)")


def _children_in_law(list_re: re.Pattern[str]):
    def handler(m: re.Match[str], text: str) -> list[Person]:
        names = list_re.search(text)
        people = [build_person(name=name) for name in split_names(names.group(1) if names else "")]
        people = [person for person in people if person is not None]
        if not people:
            person = build_person(name=m.group(1).strip())
            people = [person] if person else []
        return people

    return handler


CHILDREN_IN_LAW_TEMPLATES = (
    Template(
        "father_in_law_to",
        re.compile(r"father-in-law to\s+([A-Za-z\s]+)"),
        _children_in_law(re.compile(r"father-in-law to\s+([^.;]+)")),
    ),
    Template(
        "mother_in_law_to",
        re.compile(r"mother-in-law to\s+([A-Za-z\s]+)", re.IGNORECASE),
        _children_in_law(re.compile(r"mother-in-law to\s+([^.;]+)", re.IGNORECASE)),
    ),
)


def extract_nieces_nephews(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    if _SEVERAL_NIECES_RE.search(text):
        return record.update(nieces_nephews=[Person(name=SEVERAL_NIECES_AND_NEPHEWS)])
    return record


def extract_children_in_law(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find sons- and daughters-in-law from "father-in-law to" phrasing."""
    people = first_value(CHILDREN_IN_LAW_TEMPLATES, text)
    if not people:
        return record
    return record.update(children_in_law=people)


def extract_aunt(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    m = _AUNT_RE.search(text)
    if not m:
        return record
    return record.update(aunt=[Person(name=m.group(1))])
