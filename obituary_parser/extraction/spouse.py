"""Spouse of the deceased."""

import re

from obituary_parser.extraction.rules import Template, first_value
from obituary_parser.extraction.tokenizer import build_person
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord, Marriage, Person

_YEAR_SUFFIX_RE = re.compile(r"\s*\(\d{4}\)")


def _late_with_year(m: re.Match[str], text: str) -> Person | None:
    name = _YEAR_SUFFIX_RE.sub("", m.group(1)).strip()
    return build_person(name=name, death_year=int(m.group(2)))


def _married(m: re.Match[str], text: str) -> Person | None:
    marriage = Marriage(date=m.group(2), place=m.group(3).strip() if m.group(3) else None)
    return build_person(name=m.group(1).strip(), married=marriage)


def _late(m: re.Match[str], text: str) -> Person | None:
    return build_person(name=m.group(1).strip(), status="deceased")


def _named(m: re.Match[str], text: str) -> Person | None:
    return build_person(name=m.group(1).strip())


def _surviving_husband(m: re.Match[str], text: str) -> Person | None:
    return build_person(name=m.group(1).strip(), status="living", sex="M")


def _surviving_wife(m: re.Match[str], text: str) -> Person | None:
    return build_person(name=m.group(1).strip(), status="living", sex="F")


SPOUSE_TEMPLATES = (
    Template(
        "late_spouse_with_year",
        re.compile(r"(?:wife|husband) of the late\s+([\w\s]+)\s+\((\d{4})\)"),
        _late_with_year,
    ),
    Template(
        "married_on",
        re.compile(
            r"\bmarried ([^,]+),.*?\b(?:on\s+)?([A-Z][a-z]+ \d{1,2}, \d{4})"
            r"(?:.*?\b(?:at|in)\s+([^.,]+))?",
            re.IGNORECASE,
        ),
        _married,
    ),
    Template(
        "husband_the_late",
        re.compile(r"husband (?:to|of) the late\s([\w\s]+)[\s.]", re.IGNORECASE),
        _late,
    ),
    Template(
        "spouse_of",
        re.compile(r"\b(?:wife|husband) of ([^.,;]+)", re.IGNORECASE),
        _named,
    ),
    Template(
        "survived_by_husband",
        re.compile(r"\bsurvived by her husband ([^.,;]+)", re.IGNORECASE),
        _surviving_husband,
    ),
    Template(
        "survived_by_wife",
        re.compile(r"\bsurvived by his wife[,\s]+([^.,;]+)", re.IGNORECASE),
        _surviving_wife,
    ),
)


def extract_spouse(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find the spouse; only the highest-priority phrasing is used."""
    spouse = first_value(SPOUSE_TEMPLATES, text)
    if spouse is None:
        return record

    # A location of "the late" is a parsing artifact
    if spouse.location == "the late":
        spouse = spouse.model_copy(update={"location": None})

    return record.update(spouse=[*(record.spouse or []), spouse])
