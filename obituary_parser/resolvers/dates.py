"""Free-text date parsing.

Obituaries write dates as prose ("Tuesday, March 3rd, 1942", "3 March
1942"). The parser turns such a phrase into a :class:`datetime.date` or
gives up quietly.
"""

import datetime as dt
import logging
import re
from typing import Protocol

from dateutil import parser as dtp

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"\b\d{4}\b")


class DateParser(Protocol):
    """Anything that can turn a date phrase into a date."""

    def parse(self, phrase: str) -> dt.date | None: ...


class DateutilParser:
    """Fuzzy date parsing with python-dateutil.

    A phrase without a four-digit year is never resolved: dateutil would
    fill the missing parts from today's date.
    """

    def parse(self, phrase: str) -> dt.date | None:
        if not phrase or not _YEAR_RE.search(phrase):
            return None
        try:
            return dtp.parse(phrase, fuzzy=True, dayfirst=False).date()
        except (ValueError, OverflowError) as e:
            logger.debug("Could not parse date %r: %s", phrase, e)
            return None


def format_ymd(value: dt.date) -> str:
    """Format a date as ``YYYY/MM/DD``."""
    return value.strftime("%Y/%m/%d")
