"""Pydantic schemas for the family records extracted from an obituary.

Every category of a :class:`FamilyRecord` has its own variant: a list of
:class:`Person` records, a :class:`Parents` pair, or one of the
:class:`Birth`, :class:`Death` and :class:`Funeral` fact records.
"""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GeoPoint(BaseModel):
    """Coordinates resolved for a place name."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(description="Place name as written in the obituary")
    latitude: float
    longitude: float


class Marriage(BaseModel):
    """When and where a spouse was married."""

    model_config = ConfigDict(frozen=True)

    date: str | None = Field(default=None, description="Date as written in the obituary")
    place: str | None = None


class Person(BaseModel):
    """A relative named in the obituary."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name as written in the obituary")
    spouse: "str | Person | None" = None
    location: str | None = Field(default=None, description="Where the relative lives")
    sex: Literal["M", "F"] | None = None
    status: Literal["living", "deceased"] | None = None
    death_year: int | None = None
    grandchildren: list[str] | None = None
    married: Marriage | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


Person.model_rebuild()


class Parents(BaseModel):
    """Father and mother of the deceased."""

    model_config = ConfigDict(frozen=True)

    father: Person
    mother: Person


class Birth(BaseModel):
    """Birth facts of the deceased."""

    model_config = ConfigDict(frozen=True)

    place: str | None = None
    location: GeoPoint | None = None
    date: str | None = Field(default=None, description="YYYY/MM/DD when resolvable")

    def is_empty(self) -> bool:
        return not (self.place or self.location or self.date)


class Death(BaseModel):
    """Death facts of the deceased."""

    model_config = ConfigDict(frozen=True)

    date: str | None = None
    datetime: dt.date | None = Field(default=None, description="Resolved date of death")
    age: int | None = Field(default=None, ge=0, lt=110)
    place: str | None = None

    def is_empty(self) -> bool:
        return not (self.date or self.datetime or self.age is not None or self.place)


class Funeral(BaseModel):
    """Funeral service details."""

    model_config = ConfigDict(frozen=True)

    location: str | None = None
    date: str | None = None
    time: str | None = None

    def is_empty(self) -> bool:
        return not (self.location or self.date or self.time)


PERSON_LIST_CATEGORIES = (
    "children",
    "grandchildren",
    "spouse",
    "siblings",
    "brothers",
    "sisters",
    "children_in_law",
    "aunt",
    "nieces_nephews",
)


class FamilyRecord(BaseModel):
    """Everything extracted from one obituary.

    A category that was not mentioned is ``None``. After assembly no
    category holds an empty list or an empty fact record.
    """

    model_config = ConfigDict(frozen=True)

    children: list[Person] | None = None
    grandchildren: list[Person] | None = None
    spouse: list[Person] | None = None
    siblings: list[Person] | None = None
    brothers: list[Person] | None = None
    sisters: list[Person] | None = None
    parents: Parents | None = None
    children_in_law: list[Person] | None = None
    aunt: list[Person] | None = None
    nieces_nephews: list[Person] | None = None
    birth: Birth | None = None
    death: Death | None = None
    funeral: Funeral | None = None

    def update(self, **changes) -> "FamilyRecord":
        """Return a copy with the given categories replaced."""
        return self.model_copy(update=changes)

    def categories(self) -> list[str]:
        """Names of the categories that hold a value."""
        return [name for name in type(self).model_fields if getattr(self, name) is not None]

    def all_siblings(self) -> list[Person]:
        """Siblings of either sex, in siblings, brothers, sisters order."""
        return [*(self.siblings or []), *(self.brothers or []), *(self.sisters or [])]

    def to_dict(self) -> dict:
        """Convert to a JSON-ready mapping without the absent categories."""
        return self.model_dump(mode="json", exclude_none=True)
