"""Conversion between pandas DataFrames and Item lists."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from .item import IDENTITY, Item


def items_from_frame(
    df: pd.DataFrame,
    identity_column: str | None = None,
) -> list[Item]:
    """Build one Item per DataFrame row, in row order.

    Parameters
    ----------
    df : DataFrame
        Source table. Every non-identity column becomes metadata.
    identity_column : str, optional
        Column holding the identity. Defaults to the frame index.

    Missing values (NaN/None) leave that metadata unset on the item.
    All other values are converted with ``str``.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(df).__name__}."
        )
    if identity_column is not None:
        if identity_column not in df.columns:
            raise KeyError(
                f"Identity column '{identity_column}' not found. "
                f"Available: {list(df.columns)}"
            )
        identities = df[identity_column].tolist()
        df = df.drop(columns=[identity_column])
    else:
        identities = df.index.tolist()

    columns = [str(col) for col in df.columns]
    items: list[Item] = []
    for identity, row in zip(identities, df.itertuples(index=False, name=None)):
        metadata = [
            (col, str(value))
            for col, value in zip(columns, row)
            if not pd.isna(value)
        ]
        items.append(Item(str(identity), metadata))
    return items


def items_to_frame(items: Sequence[Item]) -> pd.DataFrame:
    """Return a DataFrame indexed by identity with one column per metadata name.

    Columns follow first-seen order across items; names differing only in
    case share a column. Unset metadata is NaN.
    """
    columns: dict[str, str] = {}
    for item in items:
        for name in item.metadata_names:
            columns.setdefault(name.lower(), name)

    records = []
    for item in items:
        row = {}
        for folded, name in columns.items():
            if item.has_metadata(folded):
                row[name] = item.get_metadata(folded)
        records.append(row)

    index = pd.Index([item.identity for item in items], name=IDENTITY)
    return pd.DataFrame(records, index=index, columns=list(columns.values()))
