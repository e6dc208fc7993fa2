"""Equi-join and group-join of two item lists on a metadata key."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..core.errors import ErrorLog
from ..core.item import IDENTITY, Item
from ..core.validation import JoinKeyValidator
from .merge import MetadataMerger

GROUP_JOIN_INNER_IS_EMPTY = "GroupJoinInnerIsEmpty"


@dataclass(frozen=True)
class JoinSpec:
    """Immutable join configuration.

    ``mark_empty_groups`` only affects group joins: every output item gets
    a GroupJoinInnerIsEmpty metadata of "True" or "False".
    """

    left_key: str = IDENTITY
    right_key: str = IDENTITY
    exclude_metadata: frozenset[str] = field(default_factory=frozenset)
    group_join: bool = False
    mark_empty_groups: bool = False

    def __post_init__(self) -> None:
        for name in ("left_key", "right_key"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}.")
        exclude = self.exclude_metadata
        if isinstance(exclude, str):
            exclude = [exclude]
        object.__setattr__(self, "exclude_metadata", frozenset(exclude))


def _index_by_key(items: Iterable[Item], key: str) -> dict[str, list[Item]]:
    """Group items by key value, keeping encounter order within each group."""
    index: dict[str, list[Item]] = {}
    for item in items:
        index.setdefault(item.get_metadata(key), []).append(item)
    return index


class EquiJoinEngine:
    """One output item per matching (left, right) pair.

    Output follows left order, then right order within each left item.
    Left items without a match produce nothing.
    """

    @staticmethod
    def join(
        left: Sequence[Item],
        right: Sequence[Item],
        spec: JoinSpec,
    ) -> list[Item]:
        merger = MetadataMerger(spec.exclude_metadata)
        index = _index_by_key(right, spec.right_key)
        joined = []
        for outer in left:
            for inner in index.get(outer.get_metadata(spec.left_key), ()):
                joined.append(merger.overlay(outer, inner))
        return joined


class GroupJoinEngine:
    """Exactly one output item per left item, aggregating all matches."""

    @staticmethod
    def group_join(
        left: Sequence[Item],
        right: Sequence[Item],
        spec: JoinSpec,
    ) -> list[Item]:
        merger = MetadataMerger(spec.exclude_metadata)
        index = _index_by_key(right, spec.right_key)
        marker = GROUP_JOIN_INNER_IS_EMPTY if spec.mark_empty_groups else None
        return [
            merger.group(outer, index.get(outer.get_metadata(spec.left_key), []), marker)
            for outer in left
        ]


def run_join(
    left: Sequence[Item],
    right: Sequence[Item],
    spec: JoinSpec,
    log: ErrorLog,
) -> list[Item]:
    """Validate join keys on both sides, then dispatch on ``spec.group_join``.

    A missing key on either side aborts the join with empty output.
    """
    left_ok = JoinKeyValidator.validate(left, spec.left_key, "Left", log)
    right_ok = JoinKeyValidator.validate(right, spec.right_key, "Right", log)
    if not (left_ok and right_ok):
        return []
    if spec.group_join:
        return GroupJoinEngine.group_join(left, right, spec)
    return EquiJoinEngine.join(left, right, spec)
