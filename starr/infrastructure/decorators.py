"""
Infrastructure-specific decorators, providing opt-in retry logic for
network operations. The handles themselves never retry.
"""

import logging

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from ..application.exceptions import TransportError

logger = logging.getLogger(__name__)

# --- Constants for Retry Logic ---
_RETRY_ATTEMPTS = 3
_RETRY_MIN_WAIT_SECONDS = 1
_RETRY_MAX_WAIT_SECONDS = 10


def _log_before_retry(retry_state):
    """Logs which call failed to reach its service and when it runs again."""
    error = retry_state.outcome.exception()
    target = getattr(error, "url", "") or "the service"
    logger.warning(
        f"No response from {target} in {retry_state.fn.__name__}; attempt "
        f"{retry_state.attempt_number} of {_RETRY_ATTEMPTS} failed, next in "
        f"{retry_state.next_action.sleep:.2f}s."
    )


# Wrap a coroutine that calls a handle to retry it when no response arrived.
# Status errors are answers from the service and are not retried.
retry_on_transport_error = retry(
    stop=stop_after_attempt(_RETRY_ATTEMPTS),
    wait=wait_exponential(
        multiplier=1,
        min=_RETRY_MIN_WAIT_SECONDS,
        max=_RETRY_MAX_WAIT_SECONDS,
    ),
    retry=retry_if_exception_type(TransportError),
    before_sleep=_log_before_retry,
    reraise=True,
)
