from __future__ import annotations

"""Errors raised while loading proptree configuration."""

from typing import List

from pydantic import ValidationError

from proptree.core.errors import ProptreeError

# Validation errors shown inline before the rest are counted
SUMMARY_LIMIT = 3


def summarize_validation_error(exc: ValidationError, limit: int = SUMMARY_LIMIT) -> List[str]:
    """Return ``"<field path>: <message>"`` lines for the first ``limit`` errors of ``exc``."""
    errors = exc.errors()
    lines = [f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}" for err in errors[:limit]]
    if len(errors) > limit:
        lines.append(f"... ({len(errors) - limit} more)")
    return lines


class ConfigError(ProptreeError):
    """
    A proptree YAML file could not be turned into a RunnerConfig.

    ``details`` lists the offending fields when the cause is a pydantic
    validation error, and is empty otherwise.
    """

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        self.details = summarize_validation_error(cause) if isinstance(cause, ValidationError) else []
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"{self.message} in {self.file_path}"
        if self.details:
            return f"{text}: {'; '.join(self.details)}"
        if self.cause is not None:
            return f"{text}: {self.cause}"
        return text
