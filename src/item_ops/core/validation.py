"""Input validation: required metadata checks for sort and join."""

from __future__ import annotations

from typing import Any, Sequence

from .errors import ErrorLog, MissingJoinKeyMetadata, MissingMetadataForSort
from .item import Item


def validate_items(items: Any, name: str) -> list[Item]:
    """Validate that ``items`` is a sequence of Item and return it as a list."""
    if items is None:
        return []
    if isinstance(items, (str, bytes, Item)):
        raise TypeError(
            f"{name} must be a sequence of Item, got {type(items).__name__}."
        )
    items = list(items)
    bad = [type(x).__name__ for x in items if not isinstance(x, Item)]
    if bad:
        raise TypeError(
            f"{name} must contain only Item objects. Found: {sorted(set(bad))[:5]}"
        )
    return items


def validate_sort_metadata(
    items: Sequence[Item],
    keys: Sequence[str],
    log: ErrorLog,
) -> bool:
    """Check every item carries every sort key.

    Logs one MissingMetadataForSort carrying the number of offending items
    and the first key missing on the first offending item.
    """
    first_missing: str | None = None
    missing_count = 0
    for item in items:
        absent = [key for key in keys if not item.has_metadata(key)]
        if absent:
            missing_count += 1
            if first_missing is None:
                first_missing = absent[0]
    if missing_count:
        log.log_error(MissingMetadataForSort(missing_count, first_missing))
        return False
    return True


class JoinKeyValidator:
    """Confirms every item on one side of a join carries the join key."""

    @staticmethod
    def validate(
        items: Sequence[Item],
        key: str,
        side: str,
        log: ErrorLog,
    ) -> bool:
        missing_count = sum(1 for item in items if not item.has_metadata(key))
        if missing_count:
            log.log_error(MissingJoinKeyMetadata(side, key, missing_count))
            return False
        return True
