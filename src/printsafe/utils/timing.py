"""Call timing for printsafe runners"""
import logging
import time
from functools import wraps

def _now():
    return time.perf_counter()

def timeit(logger: logging.Logger, name: str | None = None):
    """Log the duration of every call of the decorated function"""
    def deco(fn):
        label = name or fn.__qualname__
        @wraps(fn)
        def wrapper(*args, **kwargs):
            t0 = _now()
            try:
                return fn(*args, **kwargs)
            finally:
                logger.info("TIMER %s took %.3f s", label, _now() - t0)
        return wrapper
    return deco
