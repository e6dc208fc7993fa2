"""Shared test fixtures for item-ops."""

import pandas as pd
import pytest

from item_ops.core.item import Item


@pytest.fixture
def customers():
    """Three customers keyed by identity."""
    return [
        Item("C1", {"CustomerName": "Customer1", "CustomerPhone": "555-555-5550"}),
        Item("C2", {"CustomerName": "Customer2", "CustomerPhone": "555-555-5551"}),
        Item("C3", {"CustomerName": "Customer3", "CustomerPhone": "555-555-5552"}),
    ]


@pytest.fixture
def orders():
    """Five orders pointing at C2, C4, C3, C3, C2."""
    return [
        Item("O1", {"OrderName": "Order1", "CustomerId": "C2", "OrderDate": "Yesterday"}),
        Item("O2", {"OrderName": "Order2", "CustomerId": "C4", "OrderDate": "Today"}),
        Item("O3", {"OrderName": "Order3", "CustomerId": "C3", "OrderDate": "Tomorrow"}),
        Item("O4", {"OrderName": "Order4", "CustomerId": "C3", "OrderDate": "Future"}),
        Item("O5", {"OrderName": "Order5", "CustomerId": "C2", "OrderDate": "Past"}),
    ]


@pytest.fixture
def mixed_case_items():
    """Identities differing only by case, with their ordinal rank."""
    return [
        Item("aaa", {"expected": "3"}),
        Item("BBB", {"expected": "2"}),
        Item("AAA", {"expected": "1"}),
        Item("bbb", {"expected": "4"}),
    ]


@pytest.fixture
def sample_frame():
    """Small metadata table indexed by identity."""
    return pd.DataFrame(
        {
            "cell_type": ["T-cell", "B-cell", None],
            "score": [3.0, 1.0, 2.5],
        },
        index=["gene_A", "gene_B", "gene_C"],
    )
