"""Failed-login throttling for admin accounts."""

import time
from dataclasses import dataclass
from typing import Callable


@dataclass
class _Attempts:
    count: int
    first_attempt: float


class LoginRateLimiter:
    """Lock an email out after too many failed logins within a window.

    State is per process. The window starts at the first failure and a
    successful login clears it.
    """

    def __init__(
        self,
        max_attempts: int = 5,
        window_seconds: int = 15 * 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self._clock = clock
        self._attempts: dict[str, _Attempts] = {}

    def _current(self, key: str) -> _Attempts | None:
        attempts = self._attempts.get(key)
        if attempts and self._clock() - attempts.first_attempt > self.window_seconds:
            del self._attempts[key]
            return None
        return attempts

    def retry_after(self, key: str) -> int:
        """Seconds until key may try again, 0 if not locked out."""
        attempts = self._current(key)
        if attempts is None or attempts.count < self.max_attempts:
            return 0
        remaining = self.window_seconds - (self._clock() - attempts.first_attempt)
        return max(1, int(remaining))

    def record_failure(self, key: str) -> None:
        attempts = self._current(key)
        if attempts is None:
            self._attempts[key] = _Attempts(count=1, first_attempt=self._clock())
        else:
            attempts.count += 1

    def clear(self, key: str) -> None:
        self._attempts.pop(key, None)
