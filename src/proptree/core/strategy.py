"""
Strategy and value tree contracts plus the leaf strategies built on them.

Components:
- ValueTree: Stateful cursor over one generated value and its simplifications
- Strategy: Immutable configuration producing value trees from an entropy source
- Just: Constant strategy
- IntegerRange: Half-open integer range shrinking toward zero
- Map: Value-transform wrapper forwarding shrink calls to its source tree
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from pydantic import BaseModel, model_validator

from proptree.core.entropy import EntropySource


class ValueTree(ABC):
    """
    A generated value together with a search order over simpler values.

    ``simplify`` and ``complicate`` return whether the current value changed;
    at exhaustion both are no-ops returning False.
    """

    @abstractmethod
    def current(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    def simplify(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def complicate(self) -> bool:
        raise NotImplementedError


class Strategy(BaseModel, ABC):
    """Base class for all strategies."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @abstractmethod
    def new_value(self, entropy: EntropySource) -> ValueTree:
        raise NotImplementedError

    def map(self, fn: Callable[[Any], Any]) -> "Map":
        return Map(source=self, fn=fn)


class Just(Strategy, ValueTree):
    """Always produces ``value``; acts as its own (terminal) value tree."""

    value: Any

    def new_value(self, entropy: EntropySource) -> "Just":
        return self

    def current(self) -> Any:
        return self.value

    def simplify(self) -> bool:
        return False

    def complicate(self) -> bool:
        return False


class IntegerRange(Strategy):
    """Uniform integers in ``[start, end)``."""

    start: int
    end: int

    @model_validator(mode="after")
    def _check_non_empty(self) -> "IntegerRange":
        if self.end <= self.start:
            raise ValueError(f"Empty integer range [{self.start}, {self.end})")
        return self

    @property
    def origin(self) -> int:
        """The value every tree shrinks toward: zero, or the bound nearest to it."""
        if self.start <= 0 < self.end:
            return 0
        if self.end <= 0:
            return self.end - 1
        return self.start

    def new_value(self, entropy: EntropySource) -> "IntegerValueTree":
        return IntegerValueTree(entropy.between(self.start, self.end), self.origin)

    def __repr__(self) -> str:
        return f"IntegerRange({self.start}..{self.end})"


class IntegerValueTree(ValueTree):
    """
    Binary search between an origin and the generated value.

    Positions are tracked as distances from the origin: ``hi`` is the distance
    of the last value kept as a simplification and ``lo`` is the smallest
    distance not yet ruled out.
    """

    def __init__(self, value: int, origin: int):
        self.origin = origin
        self.sign = 1 if value >= origin else -1
        distance = abs(value - origin)
        self.lo = 0
        self.curr = distance
        self.hi = distance

    def current(self) -> int:
        return self.origin + self.sign * self.curr

    def _reposition(self) -> bool:
        mid = self.lo + (self.hi - self.lo) // 2
        if mid == self.curr:
            return False
        self.curr = mid
        return True

    def simplify(self) -> bool:
        if self.curr <= self.lo:
            return False
        self.hi = self.curr
        return self._reposition()

    def complicate(self) -> bool:
        if self.curr >= self.hi:
            return False
        self.lo = self.curr + 1
        return self._reposition()

    def __repr__(self) -> str:
        return (
            f"IntegerValueTree(origin={self.origin}, current={self.current()}, "
            f"lo={self.lo}, curr={self.curr}, hi={self.hi})"
        )


class Map(Strategy):
    """Applies a pure ``fn`` to every value produced by ``source``."""

    source: Strategy
    fn: Callable[[Any], Any]

    def new_value(self, entropy: EntropySource) -> "MapValueTree":
        return MapValueTree(self.source.new_value(entropy), self.fn)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", repr(self.fn))
        return f"Map({self.source!r}, {name})"


class MapValueTree(ValueTree):
    def __init__(self, source: ValueTree, fn: Callable[[Any], Any]):
        self.source = source
        self.fn = fn

    def current(self) -> Any:
        return self.fn(self.source.current())

    def simplify(self) -> bool:
        return self.source.simplify()

    def complicate(self) -> bool:
        return self.source.complicate()

    def __repr__(self) -> str:
        return f"MapValueTree({self.source!r})"
