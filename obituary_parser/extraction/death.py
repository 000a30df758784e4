"""Death facts: date, age and place."""

import re

from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import Death, FamilyRecord

MAX_AGE = 110

_PASSED_AWAY_ON_RE = re.compile(
    r"\bpassed away\b.*?\b(?:on\s+)?([A-Z]+ \d{1,2}, \d{4})", re.IGNORECASE
)
_AGE_RE = re.compile(r",\s(\d{1,3}), of\s")
_DIED_AT_RE = re.compile(r"\b(?:passed away|died)\b([a-z0-9\s,]+)\sat\s+(.+?)\.", re.IGNORECASE)
_PLACE_ON_DATE_RE = re.compile(r"(.+)\s+on\s+([A-Z]+ \d{1,2}, \d{4})", re.IGNORECASE)
_PLACE_ON_PHRASE_RE = re.compile(r"(.+)\son\s(.+)")
_RESIDENCE_PREFIX_RE = re.compile(r"^\bthe residence,\s")
_AFTER_A_RE = re.compile(r"\bafter a.*$")
_TRAILING_COMMA_RE = re.compile(r",\s+$")


def _place_of_death(m: re.Match[str], resolver: Resolver) -> dict:
    """Split the place of death from any date written after it."""
    facts = {}
    place = m.group(2)

    dated = _PLACE_ON_DATE_RE.search(place)
    if dated:
        place = dated.group(1)
        facts["date"] = dated.group(2)
        facts["datetime"] = resolver.date(dated.group(2))
    else:
        dated = _PLACE_ON_PHRASE_RE.search(place)
        if dated:
            place = dated.group(1)
            resolved = resolver.date(dated.group(2))
            if resolved:
                facts["date"] = resolver.ymd(dated.group(2))
                facts["datetime"] = resolved

    place = _RESIDENCE_PREFIX_RE.sub("", place)
    place = _AFTER_A_RE.sub("", place)
    place = _TRAILING_COMMA_RE.sub("", place)
    facts["place"] = place.strip()
    return facts


def extract_death(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find when, where and at what age the deceased died."""
    facts = {}

    m = _PASSED_AWAY_ON_RE.search(text)
    if m:
        facts["date"] = m.group(1)
        facts["datetime"] = resolver.date(m.group(1))

    m = _AGE_RE.search(text)
    if m and int(m.group(1)) < MAX_AGE:
        facts["age"] = int(m.group(1))

    m = _DIED_AT_RE.search(text)
    if m:
        facts.update(_place_of_death(m, resolver))

    facts = {key: value for key, value in facts.items() if value not in (None, "")}
    if not facts:
        return record
    return record.update(death=Death(**facts))
