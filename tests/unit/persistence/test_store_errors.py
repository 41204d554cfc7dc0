"""Unit tests for store error translation."""

import pytest
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from jolt.domain.error import ErrorKind
from jolt.persistence.error import StoreUnavailableError, translate_store_errors


def failing(exc: Exception):
    @translate_store_errors
    async def operation():
        raise exc

    return operation


class TestTranslateStoreErrors:
    """Tests for the translate_store_errors decorator."""

    @pytest.mark.asyncio
    async def test_passes_results_through(self):
        @translate_store_errors
        async def operation(x):
            return x * 2

        assert await operation(21) == 42

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc",
        [
            OperationalError("SELECT 1", {}, Exception("connection refused")),
            ConnectionRefusedError("connection refused"),
            TimeoutError("connect timed out"),
            DBAPIError("SELECT 1", {}, Exception("gone"), connection_invalidated=True),
        ],
    )
    async def test_connectivity_failures_become_store_unavailable(self, exc):
        with pytest.raises(StoreUnavailableError) as exc_info:
            await failing(exc)()

        assert exc_info.value.kind == ErrorKind.STORE_UNAVAILABLE
        assert exc_info.value.__cause__ is exc

    @pytest.mark.asyncio
    async def test_constraint_violations_pass_through(self):
        with pytest.raises(IntegrityError):
            await failing(IntegrityError("INSERT", {}, Exception("duplicate key")))()

    @pytest.mark.asyncio
    async def test_other_dbapi_errors_pass_through(self):
        with pytest.raises(DBAPIError):
            await failing(DBAPIError("SELECT 1", {}, Exception("syntax")))()
