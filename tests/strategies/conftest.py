"""
Shared fixtures for strategy core tests.
"""

import pytest

from proptree.core.entropy import EntropySource
from proptree.core.option import NoneStrategy, OptionValueTree, wrap_some
from proptree.core.strategy import IntegerValueTree, MapValueTree
from proptree.core.union import WeightedUnionValueTree


@pytest.fixture
def make_present_tree():
    """Factory for option trees generated as present(value)."""

    def _make(value: int, origin: int = 0) -> OptionValueTree:
        inner = MapValueTree(IntegerValueTree(value, origin), wrap_some)
        return OptionValueTree(WeightedUnionValueTree([NoneStrategy(), inner], pick=1))

    return _make


@pytest.fixture
def absent_tree() -> OptionValueTree:
    """Option tree generated as absent."""
    return OptionValueTree(WeightedUnionValueTree([NoneStrategy()], pick=0))


@pytest.fixture
def entropy() -> EntropySource:
    """Fixed-seed entropy source so statistical tests are reproducible."""
    return EntropySource(seed=20170917)
