"""Family extraction from obituary text.

This module ties the pieces together: the text is validated, run through
the rule pipeline and pruned into a :class:`FamilyRecord`.
"""

import logging
from typing import IO

from obituary_parser.config import Settings, settings
from obituary_parser.extraction.pipeline import STEPS, Step, run_pipeline
from obituary_parser.ingestion import normalize_text
from obituary_parser.resolvers import GeocodeCache, NominatimGeocoder, PlaceCache, Resolver
from obituary_parser.schemas import FamilyRecord
from obituary_parser.storage import SQLiteGeocodeCache

logger = logging.getLogger(__name__)


class ObituaryExtractor:
    """Extract family relationships and life facts from obituaries."""

    def __init__(
        self,
        resolver: Resolver | None = None,
        steps: tuple[tuple[str, Step], ...] | None = None,
    ):
        """Initialize the extractor.

        Args:
            resolver: Date and place resolver (default: dates only, no geocoding)
            steps: Override of the pipeline steps, mainly for tests
        """
        self.resolver = resolver or Resolver()
        self.steps = steps or STEPS

    @classmethod
    def from_settings(
        cls, config: Settings | None = None, cache: PlaceCache | None = None
    ) -> "ObituaryExtractor":
        """Build an extractor as configured.

        Args:
            config: Settings to use (default: the global settings)
            cache: Geocode cache to share between extractors

        Returns:
            An extractor that geocodes birthplaces when geocoding is enabled
        """
        config = config or settings
        geocoder = None
        if config.geocode_enabled:
            if cache is None and config.geocode_cache_db:
                cache = SQLiteGeocodeCache(db_path=config.geocode_cache_db)
            geocoder = NominatimGeocoder(
                user_agent=config.geocoder_user_agent,
                timeout=config.geocode_timeout,
                cache=cache if cache is not None else GeocodeCache(),
            )
        return cls(resolver=Resolver(geocoder=geocoder))

    def extract(self, text: str | IO[str]) -> FamilyRecord | None:
        """Extract the family record from one obituary.

        Args:
            text: The obituary, or a file-like object holding it

        Returns:
            The family record, or None when no relative or fact was found

        Raises:
            pydantic.ValidationError: If the text is empty, too long, or not a string
        """
        text = normalize_text(text)
        record = run_pipeline(text, self.resolver, self.steps)
        if record is None:
            logger.info("No family information found (length=%d)", len(text))
        return record

    def extract_batch(self, texts: list[str]) -> list[FamilyRecord | None]:
        """Extract family records from multiple obituaries.

        Args:
            texts: Obituary texts

        Returns:
            One result per text, in order
        """
        results = []
        for text in texts:
            result = self.extract(text)
            results.append(result)
        return results
