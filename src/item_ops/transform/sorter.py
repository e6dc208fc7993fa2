"""Sorter: validate order-by instructions and sort items."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from ..core.errors import DuplicateSortKey, ErrorLog
from ..core.item import Item
from ..core.validation import validate_sort_metadata
from .comparator import CompositeComparator
from .order_spec import OrderInstruction, OrderSpecParser, find_duplicate_keys


class Sorter:
    """Sorts items by metadata using the order-by mini-language.

    Order among items that tie on every key is unspecified.
    """

    @staticmethod
    def compute_order(
        items: Sequence[Item],
        instructions: Sequence[OrderInstruction],
    ) -> np.ndarray:
        """Return the positions of ``items`` in sorted order.

        Instructions must already be validated (distinct keys, metadata
        present on every item).
        """
        key = CompositeComparator(instructions).sort_key()
        positions = sorted(range(len(items)), key=lambda i: key(items[i]))
        return np.array(positions, dtype=np.intp)

    @classmethod
    def sort(
        cls,
        items: Sequence[Item],
        order_by: Iterable[str] | None,
        log: ErrorLog,
    ) -> list[Item]:
        """Return a sorted copy of ``items``.

        Returns an empty list, with an error logged, when the order-by
        repeats a key or any item lacks a sort key. A malformed directive
        is logged and skipped; the remaining instructions still apply.
        """
        if not items:
            return []

        instructions = OrderSpecParser.parse(order_by, log)

        duplicates = find_duplicate_keys(instructions)
        if duplicates:
            log.log_error(DuplicateSortKey(tuple(duplicates)))
            return []

        keys = [instruction.key for instruction in instructions]
        if not validate_sort_metadata(items, keys, log):
            return []

        order = cls.compute_order(items, instructions)
        return [items[i] for i in order]
