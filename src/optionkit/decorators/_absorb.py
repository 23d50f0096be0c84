"""Debug logging for exceptions absorbed at an adapter boundary."""

from __future__ import annotations

from typing import Any

from optionkit._config import get_config
from optionkit._logging import get_logger

__all__ = ['log_absorbed']


def log_absorbed(adapter: str, wrapped: Any, exc: BaseException) -> None:
    """Record that ``adapter`` turned an exception from ``wrapped`` into an Option."""
    if not get_config().log_absorbed:
        return
    get_logger('optionkit.decorators').debug(
        'exception absorbed',
        adapter=adapter,
        function=getattr(wrapped, '__qualname__', repr(wrapped)),
        error_type=type(exc).__qualname__,
        error=str(exc),
    )
