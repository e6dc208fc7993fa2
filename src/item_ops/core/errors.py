"""Structured error values and the per-call error log.

Sort and join never raise for bad input data. They record an error value
here and keep going (or abort with empty output); the caller decides
success by checking :attr:`ErrorLog.has_logged_errors`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemError(ABC):
    """Base for all reported errors."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def severity(self) -> str:
        return "error"

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable rendering of the error fields."""
        ...

    def to_dict(self) -> dict:
        fields = {
            name: getattr(self, name) for name in self.__dataclass_fields__
        }
        return {"kind": self.kind, "severity": self.severity, **fields}


@dataclass(frozen=True)
class DuplicateSortKey(ItemError):
    keys: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Cannot sort - repeated key {','.join(self.keys)}."


@dataclass(frozen=True)
class MissingMetadataForSort(ItemError):
    missing_count: int
    key: str

    @property
    def message(self) -> str:
        return (
            f"Cannot sort - {self.missing_count} item(s) missing "
            f"metadata '{self.key}'."
        )


@dataclass(frozen=True)
class MalformedOrderSpecOption(ItemError):
    directive: str
    option: str

    @property
    def message(self) -> str:
        return f"Unknown order option '{self.option}' in '{self.directive}'."


@dataclass(frozen=True)
class MissingJoinKeyMetadata(ItemError):
    side: str
    key: str
    missing_count: int

    @property
    def message(self) -> str:
        return (
            f"Missing metadata. The {self.key} metadata must be set on all "
            f"items in {self.side} ({self.missing_count} missing)."
        )


class ErrorLog:
    """Collects errors for one operation and mirrors them to ``logging``."""

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: list[ItemError] = []

    @property
    def errors(self) -> tuple[ItemError, ...]:
        return tuple(self._errors)

    @property
    def has_logged_errors(self) -> bool:
        return bool(self._errors)

    def log_error(self, error: ItemError) -> None:
        self._errors.append(error)
        logger.error(
            error.message,
            extra={"error_kind": error.kind, "error_fields": error.to_dict()},
        )
