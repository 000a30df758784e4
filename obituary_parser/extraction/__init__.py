"""Rule-based extraction of family relationships from obituaries."""

from functools import lru_cache

from obituary_parser.extraction.extractor import ObituaryExtractor
from obituary_parser.extraction.pipeline import STEPS, run_pipeline
from obituary_parser.extraction.quick import quick_scan


@lru_cache
def get_extractor() -> ObituaryExtractor:
    """The process-wide extractor built from the global settings."""
    return ObituaryExtractor.from_settings()


__all__ = ["ObituaryExtractor", "STEPS", "get_extractor", "quick_scan", "run_pipeline"]
