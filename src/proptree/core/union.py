"""
Weighted choice between alternative strategies.

The union picks one branch with probability proportional to its weight and
shrinks in two phases: first toward lower-indexed (simpler) branches, then
within the chosen branch.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, Tuple

from pydantic import field_validator

from proptree.core.entropy import EntropySource
from proptree.core.errors import PreconditionError
from proptree.core.strategy import Strategy, ValueTree

# Scale applied to a probability before truncating it to an integer weight
WEIGHT_SCALE = 2**32 - 1


def check_probability(probability: float) -> None:
    """Raise PreconditionError unless ``probability`` lies strictly inside (0, 1)."""
    if isinstance(probability, bool) or not isinstance(probability, (int, float)):
        raise PreconditionError(f"Probability must be a real number, got {probability!r}")
    if math.isnan(probability) or not 0.0 < probability < 1.0:
        raise PreconditionError(f"Invalid probability: {probability} (must be between 0.0 and 1.0, exclusive)")


def float_to_weight(probability: float) -> Tuple[int, int]:
    """
    Convert a probability into a ``(weight_of_outcome, weight_of_rest)`` pair.

    Both weights are at least 1 and their ratio approximates
    ``probability / (1 - probability)``.
    """
    check_probability(probability)
    positive = max(1, int(probability * WEIGHT_SCALE))
    negative = max(1, WEIGHT_SCALE - positive)
    return positive, negative


class WeightedUnion(Strategy):
    """Chooses among ``options`` with probability proportional to each weight."""

    options: Tuple[Tuple[int, Strategy], ...]

    @field_validator("options")
    @classmethod
    def _check_options(cls, v: Tuple[Tuple[int, Strategy], ...]) -> Tuple[Tuple[int, Strategy], ...]:
        if not v:
            raise ValueError("WeightedUnion requires at least one option")
        for index, (weight, _strategy) in enumerate(v):
            if weight < 1:
                raise ValueError(f"Option {index} has non-positive weight {weight}")
        return v

    @property
    def total_weight(self) -> int:
        return sum(weight for weight, _ in self.options)

    def _pick(self, entropy: EntropySource) -> int:
        point = entropy.below(self.total_weight)
        for index, (weight, _strategy) in enumerate(self.options):
            if point < weight:
                return index
            point -= weight
        raise AssertionError("weighted pick fell outside total weight")  # pragma: no cover

    def new_value(self, entropy: EntropySource) -> "WeightedUnionValueTree":
        pick = self._pick(entropy)
        # Simpler branches are generated up front so a branch switch never draws entropy
        trees = [strategy.new_value(entropy) for _weight, strategy in self.options[: pick + 1]]
        return WeightedUnionValueTree(trees, pick)

    def __repr__(self) -> str:
        inner = ", ".join(f"({weight}, {strategy!r})" for weight, strategy in self.options)
        return f"WeightedUnion([{inner}])"


class WeightedUnionValueTree(ValueTree):
    """
    Value tree over the branches ``0..pick`` generated by a WeightedUnion.

    ``min_pick`` is the lowest branch still worth switching to; it is raised
    whenever a switch is undone so the same switch is not retried.
    """

    def __init__(self, trees: List[ValueTree], pick: int):
        self.trees = trees
        self.pick = pick
        self.min_pick = 0
        self.prev_pick: Optional[int] = None

    @property
    def active(self) -> ValueTree:
        return self.trees[self.pick]

    @property
    def can_switch(self) -> bool:
        return self.pick > self.min_pick

    def current(self) -> Any:
        return self.active.current()

    def simplify(self) -> bool:
        if self.can_switch:
            self.prev_pick = self.pick
            self.pick -= 1
            return True
        if self.active.simplify():
            self.prev_pick = None
            return True
        return False

    def complicate(self) -> bool:
        if self.prev_pick is not None:
            self.pick = self.prev_pick
            self.min_pick = self.prev_pick
            self.prev_pick = None
            return True
        return self.active.complicate()

    def __repr__(self) -> str:
        return (
            f"WeightedUnionValueTree(pick={self.pick}, min_pick={self.min_pick}, "
            f"prev_pick={self.prev_pick}, trees={self.trees!r})"
        )
