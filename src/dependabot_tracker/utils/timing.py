"""Performance timing decorator."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable

logger = logging.getLogger("dependabot_tracker")


def timed(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs execution time of a function."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.monotonic()
        try:
            return fn(*args, **kwargs)
        finally:
            elapsed = time.monotonic() - start
            logger.info("%s completed in %.3fs", fn.__name__, elapsed)

    return wrapper
