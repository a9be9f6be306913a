"""Timeout and single-retry guard for article store calls.

Reads may be retried once on a transient driver error; writes and commits
are never retried because the transaction they belonged to is gone after
the rollback. Whatever still fails surfaces as ``StoreUnavailableError``.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, Protocol, TypeVar

from sqlalchemy.exc import InterfaceError, OperationalError

from newsroom.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS: tuple[type[BaseException], ...] = (
    OperationalError,
    InterfaceError,
    asyncio.TimeoutError,
    TimeoutError,
    ConnectionError,
)

T = TypeVar("T")


class GuardedStore(Protocol):
    """What ``store_call`` needs from the object whose methods it wraps."""

    store_timeout: float
    store_retry_attempts: int

    async def recover(self) -> None: ...


def store_call(
    operation: str, *, retryable: bool = False
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorate an async store method with a timeout and, for reads, one retry."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(self: GuardedStore, *args: Any, **kwargs: Any) -> T:
            attempts = 1 + (max(self.store_retry_attempts, 0) if retryable else 0)
            for attempt in range(1, attempts + 1):
                try:
                    return await asyncio.wait_for(
                        func(self, *args, **kwargs), timeout=self.store_timeout
                    )
                except TRANSIENT_ERRORS as exc:
                    if attempt < attempts:
                        logger.warning(
                            "Store call '%s' failed (attempt %d/%d): %s, retrying",
                            operation, attempt, attempts, exc,
                        )
                        try:
                            await self.recover()
                        except TRANSIENT_ERRORS as recover_exc:
                            logger.error(
                                "Store call '%s' could not recover: %s", operation, recover_exc
                            )
                            raise StoreUnavailableError(operation, recover_exc) from recover_exc
                        continue
                    logger.error("Store call '%s' gave up after %d attempt(s): %s", operation, attempt, exc)
                    raise StoreUnavailableError(operation, exc) from exc
            raise StoreUnavailableError(operation)

        return wrapper

    return decorator
