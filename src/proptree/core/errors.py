from __future__ import annotations

"""Exception types raised by strategies and value trees."""


class ProptreeError(Exception):
    """Base class for all proptree errors."""


class PreconditionError(ProptreeError, ValueError):
    """A strategy was constructed with arguments outside its contract."""


class GenerationError(ProptreeError):
    """Wraps failures to produce a value with optional cause context."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __str__(self) -> str:
        return self._build_message()


class EntropyExhausted(GenerationError):
    """The entropy source ran out of its draw budget."""

    def __init__(self, max_draws: int):
        self.max_draws = max_draws
        super().__init__(f"Entropy source exhausted after {max_draws} draw(s)")
