"""Keyword search across record fields."""
from typing import Iterable, TypeVar

T = TypeVar("T")


def _field_text(value) -> str:
    if isinstance(value, (list, tuple, set)):
        return ",".join(str(v) for v in value)
    return str(value)


def search_by_keyword(records: Iterable[T], keyword: str, fields: list[str]) -> list[T]:
    """
    Case-insensitive substring match on any of the given fields.

    Args:
        records: Records to scan, results keep this order
        keyword: Text to look for
        fields: Attribute names to check on each record

    Returns:
        Matching records, no ranking
    """
    needle = keyword.lower()
    results = []
    for record in records:
        for name in fields:
            if needle in _field_text(getattr(record, name, "")).lower():
                results.append(record)
                break
    return results
