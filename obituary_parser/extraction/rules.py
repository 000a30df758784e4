"""Declarative extraction rules.

A category's cascade is an ordered tuple of :class:`Template` objects. The
first template whose pattern is found in the text wins; its handler turns
the match into the category value. Later templates are not tried.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Template:
    """One phrase template of a cascade.

    Attributes:
        name: Identifier used in debug logging
        pattern: Trigger; the template fires when this is found in the text
        handler: Called with the match and the full text; returns the value
    """

    name: str
    pattern: re.Pattern[str]
    handler: Callable[[re.Match[str], str], Any]


def first_match(templates: tuple[Template, ...], text: str) -> tuple[Template, Any] | None:
    """Run the first template whose pattern occurs in the text.

    Args:
        templates: The cascade, highest priority first
        text: Obituary text

    Returns:
        ``(template, handler result)``, or None when no template fires
    """
    for template in templates:
        m = template.pattern.search(text)
        if m:
            logger.debug("Rule %s matched at %d", template.name, m.start())
            return template, template.handler(m, text)
    return None


def first_value(templates: tuple[Template, ...], text: str) -> Any:
    """Like :func:`first_match` but return only the handler result."""
    hit = first_match(templates, text)
    return hit[1] if hit else None
