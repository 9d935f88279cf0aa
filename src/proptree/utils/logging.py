from __future__ import annotations
import logging
import reprlib
from functools import wraps
from typing import Any, Callable

_short = reprlib.Repr()
_short.maxstring = 60
_short.maxother = 60


def log_calls(logger_name: str | None = None, *, level: int = logging.DEBUG) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging calls and results with abbreviated reprs; failures are logged with traceback."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            if logger.isEnabledFor(level):
                logger.log(level, "Calling %s args=%s kwargs=%s", func.__qualname__, _short.repr(args), _short.repr(kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.exception("Error in %s: %s", func.__qualname__, e)
                raise
            if logger.isEnabledFor(level):
                logger.log(level, "%s returned %s", func.__qualname__, _short.repr(result))
            return result

        return _wrapper

    return _decorator


def configure_logging(verbose: bool = False) -> None:
    """Route proptree log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
