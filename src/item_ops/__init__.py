"""item-ops: in-memory sort and join operators over metadata-carrying items."""

import logging

from ._version import __version__
from .api import OperationResult, join_items, sort_items
from .core.errors import (
    DuplicateSortKey,
    ErrorLog,
    ItemError,
    MalformedOrderSpecOption,
    MissingJoinKeyMetadata,
    MissingMetadataForSort,
)
from .core.frame import items_from_frame, items_to_frame
from .core.item import IDENTITY, Item
from .transform.join import GROUP_JOIN_INNER_IS_EMPTY, JoinSpec
from .transform.merge import LIST_DELIMITER
from .transform.order_spec import OrderInstruction

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Item",
    "IDENTITY",
    "OperationResult",
    "sort_items",
    "join_items",
    "JoinSpec",
    "OrderInstruction",
    "ErrorLog",
    "ItemError",
    "DuplicateSortKey",
    "MissingMetadataForSort",
    "MalformedOrderSpecOption",
    "MissingJoinKeyMetadata",
    "GROUP_JOIN_INNER_IS_EMPTY",
    "LIST_DELIMITER",
    "items_from_frame",
    "items_to_frame",
]
