"""Pydantic schemas for extracted family records."""

from obituary_parser.schemas.family import (
    PERSON_LIST_CATEGORIES,
    Birth,
    Death,
    FamilyRecord,
    Funeral,
    GeoPoint,
    Marriage,
    Parents,
    Person,
)

__all__ = [
    "PERSON_LIST_CATEGORIES",
    "Birth",
    "Death",
    "FamilyRecord",
    "Funeral",
    "GeoPoint",
    "Marriage",
    "Parents",
    "Person",
]
