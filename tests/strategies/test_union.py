"""
Tests for weighted unions and probability-to-weight conversion.
"""

import pytest
from pydantic import ValidationError

from proptree.core.errors import PreconditionError
from proptree.core.option import NoneStrategy
from proptree.core.sanity import check_strategy_sanity
from proptree.core.strategy import IntegerRange, Just
from proptree.core.union import WEIGHT_SCALE, WeightedUnion, WeightedUnionValueTree, float_to_weight


class TestFloatToWeight:
    """Tests for float_to_weight."""

    def test_half_is_balanced(self):
        positive, negative = float_to_weight(0.5)
        assert abs(positive - negative) <= 1

    def test_weights_sum_to_scale(self):
        positive, negative = float_to_weight(0.3)
        assert positive + negative == WEIGHT_SCALE

    @pytest.mark.parametrize("probability", [1e-300, 1e-12, 1 - 1e-12, 0.9999999999999999])
    def test_weights_never_zero(self, probability):
        positive, negative = float_to_weight(probability)
        assert positive >= 1
        assert negative >= 1

    def test_monotonic(self):
        probabilities = [0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99]
        ratios = [p / n for p, n in map(float_to_weight, probabilities)]
        assert ratios == sorted(ratios)

    def test_ratio_preserved(self):
        positive, negative = float_to_weight(0.8)
        assert positive / negative == pytest.approx(4.0, rel=1e-6)

    @pytest.mark.parametrize("probability", [0, 1, -1, 2, float("nan")])
    def test_rejects_invalid(self, probability):
        with pytest.raises(PreconditionError):
            float_to_weight(probability)

    def test_rejects_non_numbers(self):
        with pytest.raises(PreconditionError):
            float_to_weight("0.5")  # type: ignore[arg-type]
        with pytest.raises(PreconditionError):
            float_to_weight(True)  # type: ignore[arg-type]


class TestWeightedUnion:
    """Tests for WeightedUnion construction and generation."""

    def test_requires_options(self):
        with pytest.raises(ValidationError):
            WeightedUnion(options=[])

    def test_requires_positive_weights(self):
        with pytest.raises(ValidationError):
            WeightedUnion(options=[(0, Just(value=1)), (1, Just(value=2))])

    def test_total_weight(self):
        union = WeightedUnion(options=[(2, Just(value=1)), (3, Just(value=2))])
        assert union.total_weight == 5

    def test_single_option_always_picked(self, entropy):
        union = WeightedUnion(options=[(7, Just(value="only"))])
        assert {union.new_value(entropy).current() for _ in range(20)} == {"only"}

    def test_pick_follows_weights(self, entropy):
        union = WeightedUnion(options=[(1, Just(value="a")), (3, Just(value="b"))])
        picks = [union.new_value(entropy).current() for _ in range(2000)]
        assert 1350 <= picks.count("b") <= 1650

    def test_simpler_branches_generated_eagerly(self, entropy):
        union = WeightedUnion(options=[(1, Just(value="a")), (1, Just(value="b")), (1_000_000, Just(value="c"))])
        for _ in range(20):
            tree = union.new_value(entropy)
            assert len(tree.trees) == tree.pick + 1

    def test_sanity(self):
        union = WeightedUnion(
            options=[(1, NoneStrategy()), (1, Just(value=0)), (2, IntegerRange(start=0, end=100))]
        )
        check_strategy_sanity(union)


class TestWeightedUnionValueTree:
    """Tests for branch switching and delegation."""

    def test_switches_down_one_branch_at_a_time(self):
        tree = WeightedUnionValueTree([Just(value="a"), Just(value="b"), Just(value="c")], pick=2)
        assert tree.simplify() is True
        assert tree.current() == "b"
        assert tree.simplify() is True
        assert tree.current() == "a"
        assert tree.simplify() is False

    def test_complicate_restores_and_pins(self):
        tree = WeightedUnionValueTree([Just(value="a"), Just(value="b"), Just(value="c")], pick=2)
        tree.simplify()
        assert tree.complicate() is True
        assert tree.current() == "c"
        assert tree.min_pick == 2
        assert tree.simplify() is False
        assert tree.current() == "c"

    def test_complicate_without_switch_delegates(self):
        tree = WeightedUnionValueTree([Just(value="a")], pick=0)
        assert tree.complicate() is False
