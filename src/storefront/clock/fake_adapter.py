"""Fixed clock for tests and replays."""

from datetime import UTC, datetime, timedelta

from storefront.clock.port import Clock


class FixedClock(Clock):
    """Always reports the same instant until moved with ``advance``."""

    def __init__(self, instant: datetime):
        self.instant = instant if instant.tzinfo is not None else instant.replace(tzinfo=UTC)

    def now(self) -> datetime:
        return self.instant

    def advance(self, delta: timedelta) -> None:
        self.instant = self.instant + delta
