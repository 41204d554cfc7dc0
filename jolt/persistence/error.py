"""Persistence layer errors."""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from jolt.domain.error import ErrorKind

P = ParamSpec("P")
R = TypeVar("R")


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StoreUnavailableError(PersistenceError):
    """The credential store cannot be reached; the caller may retry."""

    kind = ErrorKind.STORE_UNAVAILABLE

    def __init__(self, message: str = "Service temporarily unavailable"):
        super().__init__(message)


def translate_store_errors(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Turn connectivity failures of a repository call into StoreUnavailableError.

    Driver-level socket errors and timeouts (``OSError``) count as
    connectivity failures. Constraint violations and programming errors pass
    through untouched.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except (OperationalError, InterfaceError, PoolTimeoutError, OSError) as e:
            logfire.error(
                "Credential store unavailable",
                operation=func.__qualname__,
                error=type(e).__name__,
            )
            raise StoreUnavailableError() from e
        except DBAPIError as e:
            if e.connection_invalidated:
                logfire.error(
                    "Credential store connection lost",
                    operation=func.__qualname__,
                )
                raise StoreUnavailableError() from e
            raise

    return wrapper
