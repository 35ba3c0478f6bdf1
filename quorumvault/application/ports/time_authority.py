"""Time Authority Protocol - interface for timestamp provisioning.

Services that stamp proposals (creation and execution times) MUST inject a
TimeAuthorityProtocol implementation instead of reading the wall clock
themselves. Tests inject FakeTimeAuthority to make ordering deterministic.

Team Agreement:
> No direct wall-clock reads in production code - always inject time authority
> (enforced by scripts/check_no_datetime_now.py)
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                now = self._time.now()
                ...

    For production:
        Use SystemTimeAuthority from quorumvault/infrastructure/adapters/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time as a timezone-aware datetime."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Note:
            Use this for measuring elapsed time, not for timestamps.
            Only differences between values are meaningful.
        """
        ...
