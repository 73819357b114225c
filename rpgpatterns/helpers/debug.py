"""Debug helpers for tracing demo runs."""

import functools
import logging
import time

logger = logging.getLogger(__name__)


def log_call(fn):
    """Log what a demo function returned and how long it took."""
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        started = time.perf_counter()
        result = fn(*args, **kwargs)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{fn.__qualname__} finished in {elapsed_ms:.3f} ms -> {result!r}")
        return result
    return __wrapped
