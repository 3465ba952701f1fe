import functools
import logging
import os
import time
from collections.abc import Sized
from typing import Any, Callable, TypeVar

# Default to CRITICAL (effectively off) unless explicitly set for debug
LOG_LEVEL = os.getenv("APP_LOG_LEVEL", "CRITICAL").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.CRITICAL))

F = TypeVar("F", bound=Callable[..., Any])

_MAX_REPR = 60


def _summarize(value: Any) -> str:
    """Short form of a value for debug logs; collections log their size."""
    if isinstance(value, (str, int, float, bool)) or value is None:
        text = repr(value)
    elif isinstance(value, Sized):
        text = f"<{type(value).__name__} len={len(value)}>"
    else:
        text = f"<{type(value).__name__}>"
    if len(text) > _MAX_REPR:
        text = text[:_MAX_REPR - 3] + "..."
    return text


def log_call(func: F) -> F:
    """Decorator that logs function entry, exit and runtime at DEBUG level."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = logging.getLogger(func.__module__)
        log_debug = logger.isEnabledFor(logging.DEBUG)
        if log_debug:
            logger.debug("Entering %s", func.__qualname__)
            summarized_args = [_summarize(a) for a in args]
            summarized_kwargs = {k: _summarize(v) for k, v in kwargs.items()}
            logger.debug("args=%s kwargs=%s", summarized_args,
                         summarized_kwargs)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        runtime_ms = (time.perf_counter() - start) * 1000.0
        if log_debug:
            logger.debug("return=%s", _summarize(result))
            logger.debug("Exiting %s (%.2fms)", func.__qualname__, runtime_ms)
        return result

    return wrapper  # type: ignore[return-value]
