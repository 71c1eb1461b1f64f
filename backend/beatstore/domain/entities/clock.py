"""Host time source used to stamp entity timestamps."""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(timezone.utc)
