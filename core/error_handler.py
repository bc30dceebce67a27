"""Decorators for consistent error handling and timing around I/O steps."""
from __future__ import annotations

import functools
import time
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

from loguru import logger

from core.result import Failure, Result, Success

T = TypeVar('T')


def handle_exceptions(
    logger_instance=logger,
    default_return: Optional[Any] = None,
    reraise: bool = False,
    message: Optional[str] = None,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
):
    """Decorator to log exceptions and fall back to a default value.

    Args:
        logger_instance: Logger to use for error logging
        default_return: Value returned when the call fails
        reraise: Whether to re-raise the exception after logging
        message: Custom error message prefix
        exceptions: Exception types that are handled; others propagate
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                error_msg = message or f"Error in {func.__name__}"
                logger_instance.opt(exception=e).error(f"{error_msg}: {e}")
                if reraise:
                    raise
                return default_return
        return wrapper
    return decorator


def as_result(
    *exceptions: Type[BaseException],
) -> Callable[[Callable[..., T]], Callable[..., Result[T, BaseException]]]:
    """Decorator wrapping return values in Success and listed exceptions in Failure.

    With no exception types given every ``Exception`` is captured.
    """
    caught = exceptions or (Exception,)

    def decorator(func: Callable[..., T]) -> Callable[..., Result[T, BaseException]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Result[T, BaseException]:
            try:
                return Success(func(*args, **kwargs))
            except caught as e:
                return Failure(e)
        return wrapper
    return decorator


def log_execution_time(logger_instance=logger, level: str = "DEBUG"):
    """Decorator to log how long a function took.

    Args:
        logger_instance: Logger to use
        level: Log level name (DEBUG, INFO, ...)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start_time
                logger_instance.log(level.upper(), f"{func.__name__} executed in {elapsed:.3f}s")
        return wrapper
    return decorator
