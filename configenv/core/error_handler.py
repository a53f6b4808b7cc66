"""Decorators for turning raising functions into Result-returning ones."""
from __future__ import annotations

import functools
from typing import Callable, TypeVar

from configenv.core.result import Failure, Result, Success

T = TypeVar('T')


def as_result(func: Callable[..., T]) -> Callable[..., Result[T, Exception]]:
    """Decorator to convert function output to Result type.

    Success values are wrapped in Success, exceptions in Failure. A function
    that already returns a Success or Failure is passed through unchanged.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Result[T, Exception]:
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            return Failure(e)
        if isinstance(result, (Success, Failure)):
            return result
        return Success(result)
    return wrapper
