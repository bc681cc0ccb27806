# ABOUTME: Retry policy for chat-completion calls using tenacity
# ABOUTME: Maps httpx failures onto a small error hierarchy and retries only the transient ones

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from species_catalog.utils.logging import get_logger

logger = get_logger(__name__)


class ChatServiceError(Exception):
    """Base exception for chat-completion failures."""

    pass


class ChatRateLimitError(ChatServiceError):
    """Raised when the completion API answers 429."""

    pass


class ChatTimeoutError(ChatServiceError):
    """Raised when the completion request times out."""

    pass


class ChatConnectionError(ChatServiceError):
    """Raised when the completion API cannot be reached."""

    pass


RETRYABLE_ERRORS = (ChatRateLimitError, ChatTimeoutError, ChatConnectionError)


def convert_http_error(e: httpx.HTTPError) -> ChatServiceError:
    """Convert httpx exceptions to chat-specific ones for retry decisions."""
    if isinstance(e, httpx.HTTPStatusError):
        if e.response.status_code == 429:
            return ChatRateLimitError(f"Rate limit exceeded: {e}")
        return ChatServiceError(f"Chat API returned {e.response.status_code}: {e}")
    if isinstance(e, httpx.TimeoutException):
        return ChatTimeoutError(f"Request timeout: {e}")
    if isinstance(e, httpx.TransportError):
        return ChatConnectionError(f"Connection failed: {e}")
    return ChatServiceError(f"Chat API call failed: {e}")


def _log_retry(retry_state) -> None:
    outcome = retry_state.outcome
    logger.warning(
        "Retrying chat completion",
        attempt=retry_state.attempt_number,
        error=str(outcome.exception()) if outcome else None,
    )


def chat_retrying(
    max_attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 10.0,
    multiplier: float = 2.0,
) -> AsyncRetrying:
    """Build the retry controller for one chat-completion call.

    Usage:
        async for attempt in chat_retrying():
            with attempt:
                ...
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=multiplier, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        before_sleep=_log_retry,
        reraise=True,
    )
