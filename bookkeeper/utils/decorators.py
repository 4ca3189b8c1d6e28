"""
Decorators Module
Timing decorator for report and export calls
"""

import functools
import time
from typing import Callable
from .logger import logger


def timed(func: Callable):
    """
    Log execution time of a synchronous engine call at DEBUG level
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start_time
            logger.debug(f"{func.__name__} executed in {elapsed:.3f}s")

    return wrapper
