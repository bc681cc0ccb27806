# ABOUTME: Tests for structured logger helpers
# ABOUTME: Covers logger lookup, context binding and the API call decorator

from unittest.mock import MagicMock, patch

import pytest

from species_catalog.utils.logging.utils import (
    LogContext,
    generate_operation_id,
    get_logger,
    log_api_call,
    with_species_context,
)


def test_get_logger_returns_bound_logger():
    logger = get_logger("species_catalog.tests")

    assert hasattr(logger, "info")
    assert hasattr(logger, "bind")


def test_generate_operation_id():
    first = generate_operation_id()

    assert len(first) == 8
    assert first != generate_operation_id()


def test_log_context_binds_values():
    logger = MagicMock()

    with LogContext(logger, query="giant panda") as bound:
        assert bound is logger.bind.return_value

    logger.bind.assert_called_once_with(query="giant panda")


def test_log_context_logs_failures():
    logger = MagicMock()

    with pytest.raises(ValueError):
        with LogContext(logger, query="giant panda"):
            raise ValueError("bad")

    logger.bind.return_value.error.assert_called_once_with("Context operation failed", error="bad", error_type="ValueError")


def test_with_species_context():
    context = with_species_context("guinea pig")

    assert context.context["query"] == "guinea pig"
    assert context.context["entity_type"] == "species"


class TestLogApiCall:
    """Test the API call logging decorator."""

    @pytest.mark.asyncio
    async def test_passes_through_result(self):
        @log_api_call("test.api")
        async def call(value):
            return value * 2

        assert await call(21) == 42

    @pytest.mark.asyncio
    async def test_logs_and_reraises_failures(self):
        mock_logger = MagicMock()

        @log_api_call("test.api")
        async def call():
            raise RuntimeError("upstream down")

        with patch("species_catalog.utils.logging.utils.get_logger", return_value=mock_logger):
            with pytest.raises(RuntimeError, match="upstream down"):
                await call()

        bound = mock_logger.bind.return_value
        assert bound.error.call_args.args[0] == "API call to test.api failed"
        assert bound.error.call_args.kwargs["error_type"] == "RuntimeError"
