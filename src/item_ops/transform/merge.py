"""MetadataMerger: copy, overlay and aggregate metadata into join output."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..core.item import Item

LIST_DELIMITER = ";"


class MetadataMerger:
    """Builds join output items while honouring a metadata exclude set.

    Names are excluded by exact string match. With an empty exclude set
    no per-name check is made.
    """

    __slots__ = ("_exclude", "_has_exclusions")

    def __init__(self, exclude_metadata: Iterable[str] = ()) -> None:
        self._exclude = frozenset(exclude_metadata)
        self._has_exclusions = bool(self._exclude)

    @property
    def exclude_metadata(self) -> frozenset[str]:
        return self._exclude

    def is_excluded(self, name: str) -> bool:
        return self._has_exclusions and name in self._exclude

    def custom_metadata(self, item: Item) -> list[tuple[str, str]]:
        """Return the item's custom metadata minus excluded names."""
        pairs = item.enumerate_metadata()
        if not self._has_exclusions:
            return pairs
        return [(name, value) for name, value in pairs if name not in self._exclude]

    def base(self, outer: Item) -> list[tuple[str, str]]:
        """Metadata copied from the outer (left) item, minus excluded names."""
        return self.custom_metadata(outer)

    def overlay(self, outer: Item, inner: Item) -> Item:
        """Outer item with the inner item's metadata on top (inner wins)."""
        return Item(
            outer.identity,
            self.base(outer) + self.custom_metadata(inner),
        )

    def aggregate(self, inners: Sequence[Item]) -> list[tuple[str, str]]:
        """Join each name's values across ``inners`` with LIST_DELIMITER.

        Names keep first-seen order; names differing only in case are one
        group, spelled as first seen.
        """
        groups: dict[str, tuple[str, list[str]]] = {}
        for inner in inners:
            for name, value in self.custom_metadata(inner):
                folded = name.lower()
                if folded in groups:
                    groups[folded][1].append(value)
                else:
                    groups[folded] = (name, [value])
        return [
            (name, LIST_DELIMITER.join(values))
            for name, values in groups.values()
        ]

    def group(
        self,
        outer: Item,
        inners: Sequence[Item],
        marker: str | None = None,
    ) -> Item:
        """Outer item with aggregated inner metadata.

        With no inners the outer metadata passes through. ``marker`` names
        an extra metadata set to "True"/"False" for an empty/non-empty group.
        """
        metadata = self.base(outer) + self.aggregate(inners)
        if marker is not None and not self.is_excluded(marker):
            metadata.append((marker, str(not inners)))
        return Item(outer.identity, metadata)
