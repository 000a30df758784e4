"""Ingestion module for validating obituary text."""

from obituary_parser.ingestion.normalize import ObituaryText, normalize_text

__all__ = ["ObituaryText", "normalize_text"]
