"""Funeral service details."""

import re

from obituary_parser.extraction.rules import Template, first_value
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord, Funeral

_DATE_CLAUSE_END_RE = re.compile(r"(.+?)\.\s{2,}")
_DATE_AT_TIME_RE = re.compile(r"(.+?)\sat\s(.+)")


def _funeral(**fields) -> Funeral:
    return Funeral(**{key: value.strip() for key, value in fields.items() if value and value.strip()})


def _location_date_time(m: re.Match[str], text: str) -> Funeral:
    return _funeral(location=m.group(1), date=m.group(2), time=m.group(3))


def _loose_location_date_time(m: re.Match[str], text: str) -> Funeral:
    location, date, time = m.group(1), m.group(2), m.group(3)

    # "Wednesday 9th March at 1.15pm.  Friends may call ..."
    cut = _DATE_CLAUSE_END_RE.search(date)
    if cut:
        date = cut.group(1)
        split = _DATE_AT_TIME_RE.search(date)
        if split:
            date, time = split.group(1), split.group(2)

    return _funeral(location=location, date=date, time=time)


def _time_location(m: re.Match[str], text: str) -> Funeral:
    return _funeral(time=m.group(1), location=m.group(2))


def _location(m: re.Match[str], text: str) -> Funeral:
    return _funeral(location=m.group(1))


FUNERAL_TEMPLATES = (
    Template(
        "service_at_on_at",
        re.compile(r"funeral service.*?at\s+(.+?),?\s+on\s+(.*?),?\s+at\s+(.+?)\."),
        _location_date_time,
    ),
    Template(
        "service_at_on_at_loose",
        re.compile(
            r"funeral service.*?at\s+([^\n]+?)\s+on\s+([^\n]+)\s+at\s+([^\n]+)", re.IGNORECASE
        ),
        _loose_location_date_time,
    ),
    Template(
        "services_at_time_at_place",
        re.compile(r"funeral services.+\sat\s(.+)\sat\s(.+),\swith\s", re.IGNORECASE),
        _time_location,
    ),
    Template(
        "services_at_place",
        re.compile(r"funeral services.+\sat\s(.+),\swith\s", re.IGNORECASE),
        _location,
    ),
)


def extract_funeral(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find where and when the funeral service is held."""
    funeral = first_value(FUNERAL_TEMPLATES, text)
    if funeral is None or funeral.is_empty():
        return record
    return record.update(funeral=funeral)
