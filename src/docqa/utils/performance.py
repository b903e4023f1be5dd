"""Performance monitoring utilities."""

import time
from contextlib import contextmanager
from dataclasses import dataclass
from loguru import logger


@dataclass
class Elapsed:
    """Holds the measured duration once the timed block exits."""

    ms: float = 0.0


@contextmanager
def timer(operation: str, log_level: str = "DEBUG", threshold_ms: float = 0):
    """Context manager for timing operations.

    Args:
        operation: Description of the operation being timed
        log_level: Log level to use ("DEBUG", "INFO", "WARNING")
        threshold_ms: Only log if operation takes longer than this (in milliseconds)

    Yields:
        An ``Elapsed`` whose ``ms`` is filled in when the block finishes

    Example:
        >>> with timer("Embedding 100 chunks") as elapsed:
        ...     embeddings = embedder.embed(texts)
        >>> elapsed.ms
    """
    elapsed = Elapsed()
    start = time.perf_counter()
    try:
        yield elapsed
    finally:
        elapsed.ms = (time.perf_counter() - start) * 1000

        if elapsed.ms >= threshold_ms:
            log_func = getattr(logger, log_level.lower())
            log_func(f"{operation} took {elapsed.ms:.2f}ms")
