"""
Runner data models.

- RunnerConfig: Settings for case counts, shrink budget and replay
- ShrinkStep: One value tried during a shrink search
- ShrinkOutcome: Result of a shrink search
- RunResult: Outcome of running a test against a strategy
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class RunnerConfig(BaseModel):
    cases: int = Field(default=256, ge=1)
    max_shrink_iters: int = Field(default=4096, ge=0)
    seed: Optional[int] = None
    max_draws: Optional[int] = Field(default=None, ge=0)


class ShrinkStep(BaseModel):
    index: int
    value: Any = None
    failed: bool
    reason: Optional[str] = None


class ShrinkOutcome(BaseModel):
    minimal: Any = None
    reason: str
    steps: List[ShrinkStep] = Field(default_factory=list)
    budget_exhausted: bool = False


class RunResult(BaseModel):
    """
    Outcome of ``TestRunner.run``.

    When ``passed`` is False, ``original`` holds the first failing value and
    ``minimal`` the simplest failing value the shrink search reached.
    """

    passed: bool
    cases_run: int
    seed: int
    original: Any = None
    minimal: Any = None
    reason: Optional[str] = None
    steps: List[ShrinkStep] = Field(default_factory=list)

    @property
    def shrink_iterations(self) -> int:
        return len(self.steps)
