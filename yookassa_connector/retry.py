from dataclasses import dataclass
from typing import Optional

from .models import AttemptFailure

DEFAULT_RETRY_DELAY = 1.0


def is_retryable_status(status_code: int) -> bool:
    """Server errors and 429 Too Many Requests are worth another attempt."""
    return 500 <= status_code < 600 or status_code == 429


@dataclass(frozen=True)
class RetryPolicy:
    """Decides whether a failed attempt is retried and how long to wait.

    Delays are in seconds and grow as ``base_delay * 2 ** attempt_index``.
    ``max_delay`` caps a single wait; ``None`` means no cap.
    """

    base_delay: float = DEFAULT_RETRY_DELAY
    max_delay: Optional[float] = None

    def is_retryable(self, failure: AttemptFailure) -> bool:
        if not failure.has_response:
            return True
        # Bodies that are not an API error envelope (proxy HTML pages, empty
        # bodies) are treated like a missing response.
        if failure.payload is None:
            return True
        return is_retryable_status(failure.status_code)

    def backoff_delay(self, attempt_index: int) -> float:
        delay = self.base_delay * (2 ** attempt_index)
        if self.max_delay is not None:
            return min(delay, self.max_delay)
        return delay
