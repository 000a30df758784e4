"""Final clean-up of an extracted record."""

from obituary_parser.schemas import PERSON_LIST_CATEGORIES, FamilyRecord


def assemble(record: FamilyRecord) -> FamilyRecord | None:
    """Prune empty categories from a record.

    Blank people are removed from every list, and lists and fact records
    left empty are dropped.

    Returns:
        The pruned record, or None when no category is left
    """
    changes = {}

    for category in PERSON_LIST_CATEGORIES:
        people = getattr(record, category)
        if people is None:
            continue
        people = [person for person in people if person.name.strip()]
        changes[category] = people or None

    for category in ("birth", "death", "funeral"):
        facts = getattr(record, category)
        if facts is not None and facts.is_empty():
            changes[category] = None

    record = record.update(**changes)
    if not record.categories():
        return None
    return record
