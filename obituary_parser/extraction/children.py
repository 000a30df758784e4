"""Children of the deceased.

The phrasings are tried in a fixed order and the first one found decides
the whole category. When none of them is found, the "sons, ...;" and
"daughter, ..." clauses are read; as a last resort any "son(s) ..." or
"daughter(s) ..." sentence is split into names.
"""

import re

from obituary_parser.extraction.rules import Template, first_match
from obituary_parser.extraction.tokenizer import (
    build_person,
    extract_people_section,
    names_from_phrase,
    people_from_clause,
)
from obituary_parser.resolvers import Resolver
from obituary_parser.schemas import FamilyRecord, Person

_GRANDMOTHER_SUFFIX_RE = re.compile(r", grandmother.+")

_DAUGHTER_RE = re.compile(r"\bdaughter,?\s([a-z]+)", re.IGNORECASE)
_GRANDDAUGHTER_RE = re.compile(r"\bgranddaughter,?\s([a-z]+)", re.IGNORECASE)

_SONS_CLAUSE_RE = re.compile(r"\ssons,\s*(.*?);", re.DOTALL)
_DAUGHTER_MRS_RE = re.compile(r"\sdaughters?,\s*Mrs\.\s+(.+?)\s+(\w+),\s+([^;]+)\sand")
_ONE_DAUGHTER_RE = re.compile(r"one daughter,\s*(.+?),\s*(.+?);")
_TWO_WORDS_RE = re.compile(r"(\w+)\s+(\w+)")
_SON_OR_DAUGHTER_RE = re.compile(
    r"\b(son|daughter)s?,\s*([A-Z][a-z]+(?:\s+\([A-Z][a-z]+\))?)\s*(?:and their children ([^.;]+))?"
)
_NAME_WITH_SPOUSE_RE = re.compile(r"(.+)\s+\((.+)\)")
_GRANDKIDS_SPLIT_RE = re.compile(r"\s*,\s*|\s+and\s+")

# "son of ..." is parentage, not a list of sons
_SONS_PHRASE_RE = re.compile(r"\ssons?[,\s]\s*(?!of\b)(.+?)[;.]")
_DAUGHTERS_PHRASE_RE = re.compile(r"\sdaughters?[,\s]\s*(?!of\b)(.+?)[;.]")
_AND_THEIR_RE = re.compile(r"\sand their .+")


def _people(m: re.Match[str], text: str) -> dict[str, list[Person]]:
    return {"children": extract_people_section(m.group(1))}


def _mother_of(m: re.Match[str], text: str) -> dict[str, list[Person]]:
    section = m.group(1)
    if section:
        section = _GRANDMOTHER_SUFFIX_RE.sub("", section)
    return {"children": extract_people_section(section)}


def _sons_pair(m: re.Match[str], text: str) -> dict[str, list[Person]]:
    children = [Person(name=m.group(1), sex="M"), Person(name=m.group(2), sex="M")]
    grandchildren = []

    daughter = _DAUGHTER_RE.search(text)
    if daughter:
        children.append(Person(name=daughter.group(1), sex="F"))
    granddaughter = _GRANDDAUGHTER_RE.search(text)
    if granddaughter:
        grandchildren.append(Person(name=granddaughter.group(1), sex="F"))

    return {"children": children, "grandchildren": grandchildren}


CHILDREN_TEMPLATES = (
    Template(
        "survived_by_children",
        re.compile(r"survived by (?:his|her) children\s*([^.;]+)", re.IGNORECASE),
        _people,
    ),
    Template("loving_mum_to", re.compile(r"Loving mum to\s*([^.;]+)", re.IGNORECASE), _people),
    Template(
        "loving_father_of", re.compile(r"Loving father of\s*([^.;]+)", re.IGNORECASE), _people
    ),
    Template("mother_of", re.compile(r"\bmother of\s*([^.;]+)?,", re.IGNORECASE), _mother_of),
    Template(
        "sons_pair", re.compile(r"\bsons,?\s*([a-z]+)\s+and\s+([a-z]+)", re.IGNORECASE), _sons_pair
    ),
)


def _daughter_with_spouse(name: str, location: str) -> Person | None:
    m = _TWO_WORDS_RE.search(name)
    if m:
        return build_person(
            name=m.group(1),
            location=location,
            sex="F",
            spouse=Person(name=m.group(2), sex="M"),
        )
    return build_person(name=name, location=location, sex="F")


def _children_from_mentions(text: str) -> list[Person]:
    """Read every "son, NAME" and "daughter, NAME" mention."""
    children = []
    for m in _SON_OR_DAUGHTER_RE.finditer(text):
        sex = "M" if m.group(1) == "son" else "F"
        child = m.group(2)
        grandchildren = []
        if m.group(3):
            grandchildren = [g.strip() for g in _GRANDKIDS_SPLIT_RE.split(m.group(3)) if g.strip()]

        spouse = _NAME_WITH_SPOUSE_RE.search(child)
        if grandchildren:
            children.append(Person(name=child, sex=sex, grandchildren=grandchildren))
        elif sex == "F" and spouse:
            children.append(
                Person(name=spouse.group(1), sex="F", spouse=Person(name=spouse.group(2), sex="M"))
            )
        elif child != "Mrs":
            children.append(Person(name=child, sex=sex))
    return children


def _children_from_clauses(text: str) -> dict[str, list[Person]]:
    """Read the "sons, ...;" and "daughter, ..." clauses."""
    children = []

    m = _SONS_CLAUSE_RE.search(text)
    if m:
        children.extend(people_from_clause(m.group(1), sex="M"))

    m = _DAUGHTER_MRS_RE.search(text)
    if m:
        daughter = build_person(
            name=m.group(1),
            location=m.group(3).strip(),
            sex="F",
            spouse=Person(name=m.group(2), sex="M"),
        )
    else:
        m = _ONE_DAUGHTER_RE.search(text)
        daughter = _daughter_with_spouse(m.group(1), m.group(2)) if m else None
    if daughter is not None:
        children.append(daughter)

    if not children:
        children = _children_from_mentions(text)
    return {"children": children}


def _children_from_phrases(text: str) -> list[Person]:
    """Split any "son(s) ..." and "daughter(s) ..." sentence into names."""
    children = []
    for pattern, sex in ((_SONS_PHRASE_RE, "M"), (_DAUGHTERS_PHRASE_RE, "F")):
        m = pattern.search(text)
        if m:
            raw = _AND_THEIR_RE.sub("", m.group(1))
            children.extend(build_person(name=name, sex=sex) for name in names_from_phrase(raw))
    return [child for child in children if child is not None]


def extract_children(text: str, record: FamilyRecord, resolver: Resolver) -> FamilyRecord:
    """Find the children, and any grandchild named alongside them."""
    hit = first_match(CHILDREN_TEMPLATES, text)
    found = hit[1] if hit else _children_from_clauses(text)

    if not found.get("children"):
        found["children"] = _children_from_phrases(text)

    return record.update(**{category: people for category, people in found.items() if people})
