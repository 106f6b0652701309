"""Wrappers that capture failures as values instead of letting them propagate."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, cast, overload

from errtuple.normalize import normalize_error
from errtuple.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

logger = logging.getLogger(__name__)


def run_sync[T, E = BaseException](compute: Callable[[], T]) -> Result[T, E]:
    """Call *compute* once and capture its outcome.

    Any return value, including ``None`` or other falsy values, is a success.
    Exceptions are normalized; ``KeyboardInterrupt``, ``SystemExit`` and
    cancellation still propagate.

    Args:
        compute: A zero-argument callable.

    Returns:
        ``Success(value)`` or ``Failure(error)``.

    Example:
        value, err = run_sync(lambda: int("42"))
    """
    try:
        value = compute()
    except Exception as exc:
        logger.debug("Captured %s from %r", type(exc).__name__, compute)
        return Failure(cast("E", normalize_error(exc)))
    return Success(value)


async def run_async[T, E = BaseException](awaitable: Awaitable[T]) -> Result[T, E]:
    """Await *awaitable* once and capture how it settled.

    No timeout or cancellation is applied; race the returned coroutine
    against your own timer if you need one.

    Args:
        awaitable: A coroutine, task, or future already in flight.

    Returns:
        ``Success(value)`` or ``Failure(error)``.

    Example:
        user, err = await run_async(client.get_user(123))
    """
    try:
        value = await awaitable
    except Exception as exc:
        logger.debug("Captured %s from awaited %r", type(exc).__name__, awaitable)
        return Failure(cast("E", normalize_error(exc)))
    return Success(value)


@overload
def run[T, E = BaseException](
    target: Awaitable[T],
) -> Coroutine[Any, Any, Result[T, E]]: ...
@overload
def run[T, E = BaseException](target: Callable[[], T]) -> Result[T, E]: ...
def run(target: Any) -> Any:
    """Dispatch to :func:`run_async` for awaitables, else to :func:`run_sync`.

    Note that an ``async def`` function is a callable, not an awaitable: pass
    the coroutine (``run(fetch())``), not the function (``run(fetch)``).
    """
    if inspect.isawaitable(target):
        return run_async(target)
    return run_sync(target)
