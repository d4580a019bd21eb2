from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import requests
import structlog
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from smartmenu.core.config import settings
from smartmenu.core.errors import ExternalAPIError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

TRANSIENT_REQUEST_ERRORS = (requests.Timeout, requests.ConnectionError)


def is_transient_status(status_code: int | None) -> bool:
    # An upstream failure without a status is treated as transient
    return status_code is None or status_code == 429 or status_code >= 500


def _should_retry(exc: BaseException) -> bool:
    if isinstance(exc, TRANSIENT_REQUEST_ERRORS):
        return True
    return isinstance(exc, ExternalAPIError) and is_transient_status(exc.status_code)


def _before_sleep(service: str) -> Callable[[RetryCallState], None]:
    def _log(state: RetryCallState) -> None:
        exc = state.outcome.exception() if state.outcome else None
        logger.warning(
            "external_api_retry",
            service=service,
            attempt=state.attempt_number,
            next_wait=round(state.upcoming_sleep, 3),
            reason=str(exc) if exc else None,
        )

    return _log


def retryable(service: str, max_attempts: int | None = None) -> Callable[[F], F]:
    """Retry transient failures of calls to ``service`` with jittered backoff."""
    return retry(
        retry=retry_if_exception(_should_retry),
        stop=stop_after_attempt(max_attempts or settings.retry_max_attempts),
        wait=wait_exponential(
            multiplier=settings.retry_backoff_initial,
            max=settings.retry_backoff_max,
        )
        + wait_random(0, settings.retry_backoff_initial),
        before_sleep=_before_sleep(service),
        reraise=True,
    )
