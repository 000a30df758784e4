"""Input normalization for obituary text.

The extractor accepts the text itself or a file-like reference to it.
References are dereferenced here and the result is validated before any
extraction runs.
"""

from typing import IO

from pydantic import BaseModel, ConfigDict, Field

from obituary_parser.config import MAX_TEXT_LENGTH, MIN_TEXT_LENGTH


class ObituaryText(BaseModel):
    """Validated obituary text."""

    model_config = ConfigDict(strict=True, frozen=True)

    text: str = Field(min_length=MIN_TEXT_LENGTH, max_length=MAX_TEXT_LENGTH)


def normalize_text(text: str | IO[str]) -> str:
    """Dereference and validate obituary text.

    Args:
        text: The obituary, or a file-like object holding it

    Returns:
        The obituary text

    Raises:
        pydantic.ValidationError: If the text is not a string, is empty,
            or is longer than 5000 characters
    """
    if hasattr(text, "read"):
        text = text.read()
    return ObituaryText(text=text).text
