"""Clock factory. Defaults to the system clock; tests install a FixedClock."""

from storefront.clock.port import Clock

_current_clock: Clock | None = None


def get_clock() -> Clock:
    global _current_clock
    if _current_clock is None:
        from storefront.clock.system import SystemClock

        _current_clock = SystemClock()
    return _current_clock


def set_clock(clock: Clock) -> None:
    global _current_clock
    _current_clock = clock


def reset_clock() -> None:
    global _current_clock
    _current_clock = None
