"""
Obituary Parser - Extract family relationships from obituary text.

This package turns freeform obituary prose into structured records of the
relatives it names (children, spouse, parents, siblings, grandchildren and
more) and the facts it gives about birth, death and the funeral.
"""

from typing import IO

from pydantic import ValidationError

from obituary_parser.extraction import ObituaryExtractor, get_extractor, quick_scan
from obituary_parser.schemas import FamilyRecord

__version__ = "0.2.0"
__author__ = "Obituary Parser Contributors"


def extract(text: str | IO[str]) -> FamilyRecord | None:
    """Extract the family record from one obituary.

    Returns None when the text names no relative and gives no fact.
    Raises :class:`ValidationError` for empty or oversized text.
    """
    return get_extractor().extract(text)


__all__ = [
    "FamilyRecord",
    "ObituaryExtractor",
    "ValidationError",
    "extract",
    "quick_scan",
]
