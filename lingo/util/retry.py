"""Bounded retry with exponential backoff for read operations.

Only reads go through here. Mutations (submit, review, vote) surface
StorageError immediately so they are never applied twice.
"""

from typing import Awaitable, Callable, TypeVar

import logfire
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from lingo.config import StorageSettings
from lingo.domain.error import StorageError

T = TypeVar("T")


class ReadRetry:
    """Retry policy for idempotent storage reads."""

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 0.05,
        max_delay: float = 1.0,
        backoff_factor: float = 2.0,
    ) -> None:
        """Initialize retry policy.

        Args:
            max_attempts: Total attempts including the first one
            base_delay: Initial delay between attempts in seconds
            max_delay: Maximum delay between attempts in seconds
            backoff_factor: Multiplier for exponential backoff
        """
        self.max_attempts = max(1, max_attempts)
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "ReadRetry":
        """Build a policy from storage settings."""
        return cls(
            max_attempts=settings.read_retry_attempts,
            base_delay=settings.read_retry_base_delay,
            max_delay=settings.read_retry_max_delay,
        )

    def retrying(self, operation: str) -> AsyncRetrying:
        """tenacity controller for one read; re-raises the last StorageError."""

        def log_retry(state: RetryCallState) -> None:
            error = state.outcome.exception() if state.outcome else None
            logfire.warn(
                "Read failed, retrying",
                operation=operation,
                attempt=state.attempt_number,
                max_attempts=self.max_attempts,
                delay=state.next_action.sleep if state.next_action else 0,
                error=str(error),
            )

        return AsyncRetrying(
            retry=retry_if_exception_type(StorageError),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(
                multiplier=self.base_delay,
                exp_base=self.backoff_factor,
                max=self.max_delay,
            ),
            before_sleep=log_retry,
            reraise=True,
        )

    async def __call__(self, operation: str, read: Callable[[], Awaitable[T]]) -> T:
        """Run a read, retrying on StorageError.

        Args:
            operation: Name used in logs
            read: Zero-argument coroutine function performing the read

        Returns:
            Result of the read

        Raises:
            StorageError: If every attempt failed
        """
        try:
            return await self.retrying(operation)(read)
        except StorageError as e:
            logfire.error(
                "Read failed after retries",
                operation=operation,
                attempts=self.max_attempts,
                error=str(e),
            )
            raise
