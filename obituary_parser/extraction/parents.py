"""Parents of the deceased."""

import re

from obituary_parser.extraction.rules import Template, first_value
from obituary_parser.extraction.tokenizer import build_person
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord, Parents

_AFTER_COMMA_RE = re.compile(r",.*", re.DOTALL)
_MAIDEN_NAME_RE = re.compile(r"(.+)\s+\((.+)\)\s+(.+)")


def unwrap_maiden_name(name: str) -> str:
    """Turn "Mary (Smith) Jones" into "Mary Smith"."""
    m = _MAIDEN_NAME_RE.search(name)
    if m:
        return f"{m.group(1)} {m.group(2)}"
    return name


def _pair(father: str, mother: str) -> Parents | None:
    father, mother = build_person(name=father.strip()), build_person(name=mother.strip())
    if father is None or mother is None:
        return None
    return Parents(father=father, mother=mother)


def _late_parents(m: re.Match[str], text: str) -> Parents | None:
    father = _AFTER_COMMA_RE.sub("", m.group(1))
    mother = unwrap_maiden_name(_AFTER_COMMA_RE.sub("", m.group(2)))
    return _pair(father, mother)


def _parents_were(m: re.Match[str], text: str) -> Parents | None:
    return _pair(m.group(1), m.group(2))


PARENTS_TEMPLATES = (
    Template(
        "child_of_the_late",
        re.compile(r"(?:son|daughter) of the late\s+(.+?)\s+and\s+(.+?)\.", re.IGNORECASE),
        _late_parents,
    ),
    Template(
        "parents_were",
        re.compile(r"parents were (\w+) and (\w+)", re.IGNORECASE),
        _parents_were,
    ),
)


def extract_parents(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find the father and mother."""
    parents = first_value(PARENTS_TEMPLATES, text)
    if parents is None:
        return record
    return record.update(parents=parents)
