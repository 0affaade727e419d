"""
Precondition checks applied before the facade delegates a call.

Each check takes the client and raises if its state does not allow the call.
`requires(...)` composes them in order on an async method.
"""

from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable, TypeVar

from ic_messaging.core.exceptions import NotAuthorizedError, NotInitializedError

Check = Callable[[Any], None]
F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def connection_ready(client: Any) -> None:
    if client.connection is None:
        raise NotInitializedError()


def service_ready(client: Any) -> None:
    if client.service is None:
        raise NotInitializedError()


def authorized(client: Any) -> None:
    if not client.is_authorized:
        raise NotAuthorizedError()


def requires(*checks: Check) -> Callable[[F], F]:
    """Run `checks` against self, in order, before awaiting the wrapped method."""

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            for check in checks:
                check(self)
            return await fn(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
