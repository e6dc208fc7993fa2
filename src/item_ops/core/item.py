"""Item: an identity string plus ordered, case-insensitive custom metadata."""

from __future__ import annotations

from typing import Iterable, Mapping

IDENTITY = "Identity"

# Reserved names resolve through the item itself, never the custom map.
RESERVED_METADATA = frozenset({IDENTITY.lower()})

MetadataInput = Mapping[str, str] | Iterable[tuple[str, str]] | None


def _normalize_metadata(metadata: MetadataInput) -> dict[str, tuple[str, str]]:
    """Build the {folded_name: (name, value)} store, keeping first spelling."""
    store: dict[str, tuple[str, str]] = {}
    if metadata is None:
        return store
    pairs = metadata.items() if isinstance(metadata, Mapping) else metadata
    for name, value in pairs:
        if not isinstance(name, str):
            raise TypeError(
                f"Metadata names must be strings, got {type(name).__name__}."
            )
        if not name:
            raise ValueError("Metadata names must be non-empty.")
        if not isinstance(value, str):
            raise TypeError(
                f"Metadata '{name}' must have a string value, "
                f"got {type(value).__name__}."
            )
        folded = name.lower()
        if folded in RESERVED_METADATA:
            raise ValueError(
                f"'{name}' is reserved and cannot be set as custom metadata."
            )
        if folded in store:
            store[folded] = (store[folded][0], value)
        else:
            store[folded] = (name, value)
    return store


class Item:
    """Immutable record with an identity and ordered custom metadata.

    Metadata names are matched case-insensitively. ``Identity`` is a
    reserved pseudo-metadata that always resolves to the item's identity;
    it is never part of the custom metadata returned by
    :meth:`enumerate_metadata`.
    """

    __slots__ = ("_identity", "_metadata")

    def __init__(self, identity: str, metadata: MetadataInput = None) -> None:
        if not isinstance(identity, str):
            raise TypeError(
                f"Item identity must be a string, got {type(identity).__name__}."
            )
        self._identity = identity
        self._metadata = _normalize_metadata(metadata)

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def metadata_names(self) -> list[str]:
        """Custom metadata names in insertion order."""
        return [name for name, _ in self._metadata.values()]

    @property
    def metadata_count(self) -> int:
        return len(self._metadata)

    def has_metadata(self, name: str) -> bool:
        folded = name.lower()
        return folded in RESERVED_METADATA or folded in self._metadata

    def get_metadata(self, name: str) -> str:
        """Return the metadata value, or an empty string when unset."""
        folded = name.lower()
        if folded == IDENTITY.lower():
            return self._identity
        entry = self._metadata.get(folded)
        return entry[1] if entry is not None else ""

    def enumerate_metadata(self) -> list[tuple[str, str]]:
        """Return custom metadata as ordered (name, value) pairs."""
        return list(self._metadata.values())

    def with_metadata(self, updates: MetadataInput) -> Item:
        """Return a new item with ``updates`` applied over this item's metadata."""
        return Item(self._identity, self.enumerate_metadata() + list(
            _normalize_metadata(updates).values()
        ))

    def to_dict(self) -> dict:
        return {
            "identity": self._identity,
            "metadata": dict(self.enumerate_metadata()),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return (
            self._identity == other._identity
            and [(k, v) for k, (_, v) in self._metadata.items()]
            == [(k, v) for k, (_, v) in other._metadata.items()]
        )

    def __hash__(self) -> int:
        return hash((self._identity, tuple(
            (k, v) for k, (_, v) in self._metadata.items()
        )))

    def __repr__(self) -> str:
        meta = ", ".join(f"{n}={v!r}" for n, v in self.enumerate_metadata())
        return f"Item({self._identity!r}{', ' if meta else ''}{meta})"
