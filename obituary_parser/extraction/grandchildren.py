"""Grandchildren of the deceased."""

import logging
import re

from obituary_parser.extraction.tokenizer import build_person, extract_people_section, split_names
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord, Person

logger = logging.getLogger(__name__)

_GRANDCHILDREN_RE = re.compile(r"grandchildren\s+([^.;]+)", re.IGNORECASE)
_TOKEN_SPLIT_RE = re.compile(r"\s*(?:,|\band\b)\s*", re.IGNORECASE)
_BROTHERS_PREFIX_RE = re.compile(r"^.*?brothers\s*")

# "devoted Grandma to Tom, Dick, and Harry and loved Mother-in-law to Jack and Jill"
_GRANDMA_TO_RE = re.compile(r"Grandma to (.*?)(?: and loved|$)")
_GRANDM_WORD_RE = re.compile(r"grandm\w+\s")
_GRANDM_SPAN_RE = re.compile(r".+(grandm\w+\s+.+?\sand\s[\w.;,]+).+")
_GRANDM_TO_RE = re.compile(r"grandm\w+\sto\s+([^.;]+)", re.IGNORECASE)


def _named(names: list[str]) -> list[Person]:
    people = [build_person(name=name) for name in names]
    return [person for person in people if person is not None]


def _grandparent_phrase(text: str) -> list[str]:
    """Names after "Grandma to", or after any "grandm... to" phrase."""
    m = _GRANDMA_TO_RE.search(text)
    names = split_names(m.group(1)) if m else []
    if names or not _GRANDM_WORD_RE.search(text):
        return names

    span = _GRANDM_SPAN_RE.sub(r"\1", text, count=1)
    m = _GRANDM_TO_RE.search(span)
    return split_names(m.group(1)) if m else []


def extract_grandchildren(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find the grandchildren.

    A grandchildren list whose first entry mentions brothers
    ("grandchildren and brothers Tom and Bill") is really a list of
    brothers and is moved there.
    """
    changes: dict[str, list[Person] | None] = {}
    grandchildren = list(record.grandchildren or [])

    if not grandchildren:
        m = _GRANDCHILDREN_RE.search(text)
        tokens = [token.strip() for token in _TOKEN_SPLIT_RE.split(m.group(1))] if m else []
        while tokens and not tokens[0]:
            tokens.pop(0)

        if tokens and "brothers" in tokens[0]:
            logger.debug("Grandchildren list holds brothers: %r", tokens)
            if record.brothers is None:
                tokens[0] = _BROTHERS_PREFIX_RE.sub("", tokens[0])
                brothers = extract_people_section(", ".join(token for token in tokens if token))
                changes["brothers"] = brothers or None
        else:
            grandchildren = _named([token for token in tokens if token])

    if len(grandchildren) <= 1:
        names = _grandparent_phrase(text)
        if names:
            grandchildren = _named(names)

    changes["grandchildren"] = grandchildren or None
    return record.update(**changes)
