"""The extraction pipeline.

Each step reads the whole obituary and the record built so far and returns
an updated record. Order matters: grandchildren named next to the children
are kept, sibling fallbacks look at what the earlier sibling steps found,
and a "was born ... to FATHER and MOTHER" sentence overrides the parents.
"""

import logging
from collections.abc import Callable

from obituary_parser.extraction.assembler import assemble
from obituary_parser.extraction.birth import extract_birth
from obituary_parser.extraction.children import extract_children
from obituary_parser.extraction.death import extract_death
from obituary_parser.extraction.funeral import extract_funeral
from obituary_parser.extraction.grandchildren import extract_grandchildren
from obituary_parser.extraction.parents import extract_parents
from obituary_parser.extraction.relatives import (
    extract_aunt,
    extract_children_in_law,
    extract_nieces_nephews,
)
from obituary_parser.extraction.siblings import extract_brothers, extract_sisters
from obituary_parser.extraction.spouse import extract_spouse
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord

logger = logging.getLogger(__name__)

Step = Callable[[str, FamilyRecord, Resolver], FamilyRecord]

STEPS: tuple[tuple[str, Step], ...] = (
    ("children", extract_children),
    ("grandchildren", extract_grandchildren),
    ("sisters", extract_sisters),
    ("brothers", extract_brothers),
    ("nieces_nephews", extract_nieces_nephews),
    ("parents", extract_parents),
    ("spouse", extract_spouse),
    ("funeral", extract_funeral),
    ("children_in_law", extract_children_in_law),
    ("aunt", extract_aunt),
    ("birth", extract_birth),
    ("death", extract_death),
)


def run_pipeline(
    text: str,
    resolver: Resolver,
    steps: tuple[tuple[str, Step], ...] = STEPS,
) -> FamilyRecord | None:
    """Run every step over the text and assemble the result.

    Args:
        text: Validated obituary text
        resolver: Date and place resolver
        steps: The steps to run, in order

    Returns:
        The family record, or None when nothing was found
    """
    record = FamilyRecord()
    for name, step in steps:
        record = step(text, record, resolver)
        logger.debug("After %s: %s", name, record.categories())
    return assemble(record)
