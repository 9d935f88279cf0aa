from __future__ import annotations

"""Seedable entropy source threaded through every generation call."""

import random

from proptree.core.errors import EntropyExhausted, PreconditionError

_SEED_BITS = 64


class EntropySource:
    """
    Reproducible randomness provider.

    Every strategy draws from the source it is handed instead of the global
    ``random`` module, so replaying the same seed with the same sequence of
    calls yields the same values.

    Args:
        seed: Seed for the underlying generator. A fresh seed is drawn when
            omitted and remains available through ``seed`` for replay.
        max_draws: Optional budget of draws; exceeding it raises
            ``EntropyExhausted``.
    """

    def __init__(self, seed: int | None = None, max_draws: int | None = None):
        if seed is None:
            seed = random.SystemRandom().getrandbits(_SEED_BITS)
        if max_draws is not None and max_draws < 0:
            raise PreconditionError(f"max_draws must be non-negative, got {max_draws}")
        self._seed = seed
        self._rng = random.Random(seed)
        self._max_draws = max_draws
        self._draws = 0

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def draws(self) -> int:
        return self._draws

    def _consume(self) -> None:
        if self._max_draws is not None and self._draws >= self._max_draws:
            raise EntropyExhausted(self._max_draws)
        self._draws += 1

    def below(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``."""
        if n < 1:
            raise PreconditionError(f"Upper bound must be at least 1, got {n}")
        self._consume()
        return self._rng.randrange(n)

    def between(self, lo: int, hi: int) -> int:
        """Return a uniform integer in ``[lo, hi)``."""
        if hi <= lo:
            raise PreconditionError(f"Empty interval [{lo}, {hi})")
        return lo + self.below(hi - lo)

    def fork(self) -> "EntropySource":
        """Derive an independent source seeded from this one."""
        self._consume()
        return EntropySource(self._rng.getrandbits(_SEED_BITS), max_draws=self._max_draws)

    def __repr__(self) -> str:
        return f"EntropySource(seed={self._seed}, draws={self._draws})"
