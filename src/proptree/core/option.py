"""
Strategies for generating optional values.

An optional value is either absent (``None``) or present, wrapping a value
produced by an inner strategy. Present values shrink to ``None`` first; only
when ``None`` is rejected does shrinking move on to the wrapped value.

Example:
    from proptree.core import EntropySource, IntegerRange, weighted

    strategy = weighted(0.9, IntegerRange(start=0, end=1000))
    tree = strategy.new_value(EntropySource(seed=7))
    tree.current()   # e.g. 512
    tree.simplify()  # True when present; tree.current() is now None
    tree.complicate()  # True, back to 512
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, TypeVar

from proptree.core.entropy import EntropySource
from proptree.core.strategy import Map, Strategy, ValueTree
from proptree.core.union import WeightedUnion, WeightedUnionValueTree, float_to_weight

V = TypeVar("V")

ABSENT_BRANCH = 0
PRESENT_BRANCH = 1


def wrap_some(value: V) -> Optional[V]:
    """Wrap a generated value as present. ``Optional[V]`` stores present values as-is."""
    return value


class NoneStrategy(Strategy, ValueTree):
    """Always produces ``None``; stateless, so it doubles as its own value tree."""

    def new_value(self, entropy: EntropySource) -> "NoneStrategy":
        return self

    def current(self) -> None:
        return None

    def simplify(self) -> bool:
        return False

    def complicate(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NoneStrategy"


class OptionStrategy(Strategy):
    """
    Strategy producing ``None`` or values of an inner strategy.

    Constructed by ``of`` and ``weighted``.
    """

    union: WeightedUnion

    @property
    def inner(self) -> Strategy:
        return self.union.options[PRESENT_BRANCH][1].source  # type: ignore[attr-defined]

    @property
    def probability(self) -> float:
        """Probability of producing a present value, as implied by the weights."""
        return self.union.options[PRESENT_BRANCH][0] / self.union.total_weight

    def new_value(self, entropy: EntropySource) -> "OptionValueTree":
        return OptionValueTree(self.union.new_value(entropy))

    # Written by hand so formatting depends only on the union, never on produced values
    def __repr__(self) -> str:
        return f"OptionStrategy({self.union!r})"


class OptionState(str, Enum):
    """Shrink state of an OptionValueTree."""

    PRESENT = "present"  # Generated present; switch to None not tried yet
    PRESENT_AFTER_INNER = "present_after_inner"  # Last change shrank the wrapped value
    PRESENT_RESTORED = "present_restored"  # Switch to None was undone
    ABSENT_VIA_SHRINK = "absent_via_shrink"  # Shrunk from present to None
    ABSENT = "absent"  # Generated as None


class OptionValueTree(ValueTree):
    """
    Value tree for ``OptionStrategy``.

    Transitions:
        PRESENT             --simplify-->   ABSENT_VIA_SHRINK
        ABSENT_VIA_SHRINK   --complicate--> PRESENT_RESTORED (exact prior value)
        PRESENT_RESTORED    --simplify-->   PRESENT_AFTER_INNER (inner shrink)
        PRESENT_AFTER_INNER --simplify-->   PRESENT_AFTER_INNER (inner shrink)
        PRESENT_AFTER_INNER --complicate--> PRESENT_AFTER_INNER (inner undo)

    Every other call is a no-op returning False.
    """

    def __init__(self, union: WeightedUnionValueTree):
        self.union = union
        self.state = OptionState.PRESENT if union.pick == PRESENT_BRANCH else OptionState.ABSENT

    @property
    def is_present(self) -> bool:
        return self.state not in (OptionState.ABSENT, OptionState.ABSENT_VIA_SHRINK)

    def current(self) -> Optional[Any]:
        return self.union.current()

    def simplify(self) -> bool:
        if not self.is_present:
            return False
        if not self.union.simplify():
            return False
        if self.union.pick == ABSENT_BRANCH:
            self.state = OptionState.ABSENT_VIA_SHRINK
        else:
            self.state = OptionState.PRESENT_AFTER_INNER
        return True

    def complicate(self) -> bool:
        if self.state is OptionState.ABSENT_VIA_SHRINK:
            self.union.complicate()
            self.state = OptionState.PRESENT_RESTORED
            return True
        if self.state is OptionState.PRESENT_AFTER_INNER:
            return self.union.complicate()
        return False

    def __repr__(self) -> str:
        return f"OptionValueTree(state={self.state.value}, {self.union!r})"


def of(inner: Strategy) -> OptionStrategy:
    """
    Return a strategy producing optional values wrapping values from ``inner``.

    Present values shrink to ``None``. Present and absent are each chosen with
    50% probability.

    Present values are stored as-is, so when ``inner`` can itself produce
    ``None`` (for example a nested ``of``), ``current()`` returns ``None`` for
    some present trees. Use ``OptionValueTree.state`` or ``is_present`` to tell
    such a value apart from an absent one.
    """
    return weighted(0.5, inner)


def weighted(probability: float, inner: Strategy) -> OptionStrategy:
    """
    Return a strategy producing optional values wrapping values from ``inner``.

    Present values shrink to ``None``. A present value is chosen with
    ``probability``, which must lie strictly between 0.0 and 1.0.

    As with ``of``, a present ``None`` produced by ``inner`` is only
    distinguishable from absence through the tree's ``state``.

    Raises:
        PreconditionError: If ``probability`` is outside (0.0, 1.0)
    """
    weight_present, weight_absent = float_to_weight(probability)
    return OptionStrategy(
        union=WeightedUnion(
            options=(
                (weight_absent, NoneStrategy()),
                (weight_present, Map(source=inner, fn=wrap_some)),
            )
        )
    )
