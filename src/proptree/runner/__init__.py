from .models import RunnerConfig, RunResult, ShrinkOutcome, ShrinkStep
from .test_runner import TestRunner, run_one

__all__ = [
    "RunnerConfig",
    "RunResult",
    "ShrinkOutcome",
    "ShrinkStep",
    "TestRunner",
    "run_one",
]
