"""Public entry points: sort_items and join_items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .core.errors import ErrorLog, ItemError
from .core.item import IDENTITY, Item
from .core.validation import validate_items
from .transform.join import JoinSpec, run_join
from .transform.sorter import Sorter


@dataclass(frozen=True)
class OperationResult:
    """Output of one sort or join call.

    ``items`` is always a list, empty when the operation aborted.
    ``ok`` is False whenever any error was logged.
    """

    items: list[Item]
    errors: tuple[ItemError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


def sort_items(
    items: Sequence[Item],
    order_by: Iterable[str] | str | None = None,
) -> OperationResult:
    """Sort items by metadata.

    Usage::

        result = sort_items(items, ["altKey desc", "Identity c"])
        if result.ok:
            print([item.identity for item in result.items])

    Parameters
    ----------
    items : sequence of Item
        Items to sort. The input is never modified.
    order_by : str or iterable of str, optional
        Order-by directives, ``MetadataName[ [c][asc|desc]]`` each.
        Defaults to Identity, ascending, case-insensitive.
    """
    items = validate_items(items, "items")
    log = ErrorLog()
    sorted_items = Sorter.sort(items, order_by, log)
    return OperationResult(sorted_items, log.errors)


def join_items(
    left: Sequence[Item],
    right: Sequence[Item],
    left_key: str = IDENTITY,
    right_key: str = IDENTITY,
    exclude_metadata: Iterable[str] = (),
    group_join: bool = False,
    mark_empty_groups: bool = False,
) -> OperationResult:
    """Join two item lists on metadata keys.

    Parameters
    ----------
    left, right : sequence of Item
        Outer and inner items.
    left_key, right_key : str
        Metadata compared for equality (ordinal). Default Identity.
    exclude_metadata : iterable of str
        Metadata names never copied to the output (exact match).
    group_join : bool
        One output per left item with matched values joined by ``;``,
        instead of one output per matching pair.
    mark_empty_groups : bool
        Group join only: add GroupJoinInnerIsEmpty ("True"/"False").
    """
    spec = JoinSpec(
        left_key=left_key,
        right_key=right_key,
        exclude_metadata=exclude_metadata,
        group_join=group_join,
        mark_empty_groups=mark_empty_groups,
    )
    left = validate_items(left, "left")
    right = validate_items(right, "right")
    log = ErrorLog()
    joined = run_join(left, right, spec, log)
    return OperationResult(joined, log.errors)
