"""
Strategy core.

Components:
- EntropySource: Seedable randomness threaded through generation
- Strategy / ValueTree: Generation and shrinking contracts
- Just, IntegerRange, Map: Leaf and transform strategies
- WeightedUnion: Weighted choice between strategies
- OptionStrategy: Optional values built on a two-branch WeightedUnion
- check_strategy_sanity: Generic contract checks for any strategy

Example:
    from proptree.core import EntropySource, IntegerRange, of

    tree = of(IntegerRange(start=0, end=1000)).new_value(EntropySource(seed=1))
    while tree.simplify():
        pass
"""

from proptree.core.entropy import EntropySource
from proptree.core.errors import EntropyExhausted, GenerationError, PreconditionError, ProptreeError
from proptree.core.option import NoneStrategy, OptionState, OptionStrategy, OptionValueTree, of, weighted
from proptree.core.sanity import SanityError, SanityOptions, check_strategy_sanity
from proptree.core.strategy import IntegerRange, IntegerValueTree, Just, Map, MapValueTree, Strategy, ValueTree
from proptree.core.union import WEIGHT_SCALE, WeightedUnion, WeightedUnionValueTree, float_to_weight

__all__ = [
    "EntropySource",
    "EntropyExhausted",
    "GenerationError",
    "PreconditionError",
    "ProptreeError",
    "NoneStrategy",
    "OptionState",
    "OptionStrategy",
    "OptionValueTree",
    "of",
    "weighted",
    "SanityError",
    "SanityOptions",
    "check_strategy_sanity",
    "IntegerRange",
    "IntegerValueTree",
    "Just",
    "Map",
    "MapValueTree",
    "Strategy",
    "ValueTree",
    "WEIGHT_SCALE",
    "WeightedUnion",
    "WeightedUnionValueTree",
    "float_to_weight",
]
