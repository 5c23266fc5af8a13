"""Error handling utilities for replaycache."""

from loguru import logger
import inspect
import functools
from typing import Callable, TypeVar, Any


T = TypeVar('T')


def log_source_errors(operation_name: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator to log failures raised while pulling from a source.

    The exception is always re-raised unchanged, so every caller waiting on
    the failed pull observes it.

    Args:
        operation_name: Name of the operation for logging purposes

    Returns:
        The decorated function
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Failed to {operation_name}: {str(e)}")
                    raise
            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Failed to {operation_name}: {str(e)}")
                raise
        return wrapper
    return decorator
