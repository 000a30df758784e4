"""Quick, loose scan that returns bare name strings.

This is the first-generation parser: every relationship keyword is
followed by a list of names up to the next punctuation mark. It finds more
than the cascade does but is far noisier, and it never builds structured
records. Use it for a first look at an obituary.
"""

import re

from obituary_parser.extraction.tokenizer import split_names

QUICK_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bdaughters?\s+([^.,;]+)", re.IGNORECASE), "children"),
    (re.compile(r"\bsons?\s+([^.,;]+)", re.IGNORECASE), "children"),
    (re.compile(r"\bchildren\s+([^.,;]+)", re.IGNORECASE), "children"),
    (re.compile(r"\bgrandchildren\s+([^.;]+)", re.IGNORECASE), "grandchildren"),
    (re.compile(r"\bwife\s+([^.,;]+)", re.IGNORECASE), "spouse"),
    (re.compile(r"\bhusband\s+([^.,;]+)", re.IGNORECASE), "spouse"),
    (re.compile(r"\bhis parents were\s+([^.,;]+)", re.IGNORECASE), "parents"),
    (re.compile(r"\bhis father was\s+([^.,;]+)", re.IGNORECASE), "parents"),
    (re.compile(r"\bhis mother was\s+([^.,;]+)", re.IGNORECASE), "parents"),
    (re.compile(r"\bsisters?\s+([^.,;]+)", re.IGNORECASE), "siblings"),
    (re.compile(r"\bbrothers?\s+([^.,;]+)", re.IGNORECASE), "siblings"),
    (re.compile(r"\bsiblings\s+([^.,;]+)", re.IGNORECASE), "siblings"),
)


def quick_scan(text: str) -> dict[str, list[str]]:
    """Collect every name list that follows a relationship keyword.

    >>> quick_scan("She is survived by her husband Paul, daughters Anna and Lucy.")
    {'children': ['Anna', 'Lucy'], 'spouse': ['Paul']}
    """
    found: dict[str, list[str]] = {}
    for pattern, category in QUICK_PATTERNS:
        for m in pattern.finditer(text):
            names = split_names(m.group(1))
            if names:
                found.setdefault(category, []).extend(names)
    return found
