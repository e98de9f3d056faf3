"""Bounded retry with exponential backoff for calls to external LLM providers."""

import logging
import time
from typing import Callable, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def backoff_delay(attempt: int, base_delay: float) -> float:
    """Delay in seconds after failed attempt number ``attempt`` (1-based)."""
    return base_delay * (2**attempt)


def retry_with_backoff(
    operation: Callable[[], T],
    max_attempts: int = 3,
    base_delay: float = 1.0,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
    description: str = "operation",
) -> T:
    """Call ``operation`` until it succeeds or ``max_attempts`` calls have failed.

    After failed attempt ``n`` the call waits ``base_delay * 2**n`` seconds, so
    with the defaults the waits are 2s and then 4s. Exceptions not listed in
    ``retry_on`` propagate immediately.

    Args:
        operation: Zero-argument callable to run
        max_attempts: Total number of calls allowed, including the first
        base_delay: Base delay in seconds for the exponential backoff
        retry_on: Exception types that count as a failed attempt
        sleep: Function used to wait between attempts
        description: Name of the operation for log messages

    Returns:
        The result of the first successful call

    Raises:
        ValueError: If max_attempts is smaller than 1
        Exception: The error of the last attempt once all attempts failed
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    attempt = 0
    while True:
        try:
            return operation()
        except retry_on as e:
            attempt += 1
            if attempt >= max_attempts:
                logger.error(f"{description} failed after {attempt} attempts: {str(e)}")
                raise

            delay = backoff_delay(attempt, base_delay)
            logger.warning(
                f"{description} attempt {attempt}/{max_attempts} failed: {str(e)}. "
                f"Retrying in {delay:.1f}s"
            )
            sleep(delay)
