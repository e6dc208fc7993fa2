"""CompositeComparator: chain per-key comparisons into one ordering."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Sequence

from ..core.item import Item
from .order_spec import OrderInstruction


def compare_ordinal(a: str, b: str) -> int:
    """Exact code-point comparison. Returns -1, 0 or 1."""
    return (a > b) - (a < b)


def _fold_char(c: str) -> str:
    upper = c.upper()
    # Only one-to-one mappings; "ß" -> "SS" would change the length.
    return upper if len(upper) == 1 else c


def fold_case(s: str) -> str:
    """Simple per-character upper-case mapping, independent of locale."""
    return "".join(_fold_char(c) for c in s)


def compare_ordinal_ignore_case(a: str, b: str) -> int:
    """Code-point comparison of the case-folded strings."""
    return compare_ordinal(fold_case(a), fold_case(b))


class CompositeComparator:
    """Total ordering over items built from an instruction list.

    Instructions are applied left to right; the first non-zero result
    wins. Items tying on every key compare equal.
    """

    __slots__ = ("_instructions", "_comparisons")

    def __init__(self, instructions: Sequence[OrderInstruction]) -> None:
        self._instructions = tuple(instructions)
        self._comparisons = tuple(
            self._build(instruction) for instruction in self._instructions
        )

    @property
    def instructions(self) -> tuple[OrderInstruction, ...]:
        return self._instructions

    @staticmethod
    def _build(instruction: OrderInstruction) -> Callable[[Item, Item], int]:
        key = instruction.key
        modifier = 1 if instruction.ascending else -1
        compare = (
            compare_ordinal_ignore_case
            if instruction.case_insensitive
            else compare_ordinal
        )

        def comparison(a: Item, b: Item) -> int:
            return compare(a.get_metadata(key), b.get_metadata(key)) * modifier

        return comparison

    def compare(self, a: Item, b: Item) -> int:
        for comparison in self._comparisons:
            result = comparison(a, b)
            if result != 0:
                return result
        return 0

    def sort_key(self):
        """Key function for ``sorted``/``list.sort``."""
        return cmp_to_key(self.compare)
