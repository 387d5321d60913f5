"""Time granularity units, from nanoseconds up to days.

This module provides the TimeUnit enumeration: integer conversion between
units, name lookup, duration construction and blocking waits. All
conversion arithmetic passes through nanoseconds and is bounded by the
unsigned 64-bit range.
"""

import logging
import time
from collections.abc import Callable
from datetime import timedelta
from enum import StrEnum
from typing import Any

from dateutil.relativedelta import relativedelta

from chronounit.util import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_SCALE,
    U64_MAX,
    check_amount,
)

logger = logging.getLogger(__name__)


class TimeUnit(StrEnum):
    """Closed set of time granularities.

    The value of each member is its display name, so ``str(unit)`` and
    ``unit.value`` both give e.g. ``"Seconds"``.

    Examples:
        >>> TimeUnit.MILLISECONDS.to_seconds(5000)
        5
        >>> TimeUnit.value_of("Hours")
        <TimeUnit.HOURS: 'Hours'>
        >>> TimeUnit.insensitive_case_value_of("HOURS") is TimeUnit.HOURS
        True
    """

    NANOSECONDS = "Nanoseconds"
    MICROSECONDS = "Microseconds"
    MILLISECONDS = "Milliseconds"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    DAYS = "Days"

    @property
    def nanos(self) -> int:
        """Number of nanoseconds in one unit."""
        return _NANOS[self]

    @classmethod
    def value_of(cls, name: str) -> "TimeUnit | None":
        """Return the unit whose display name is exactly ``name``, else None."""
        if not isinstance(name, str):
            return None
        return _BY_NAME.get(name)

    @classmethod
    def insensitive_case_value_of(cls, name: str) -> "TimeUnit | None":
        """Like value_of(), but ignoring case ("SECONDS", "seconds", ...)."""
        if not isinstance(name, str):
            return None
        return _BY_LOWER_NAME.get(name.lower())

    def convert(self, amount: int, source: "TimeUnit") -> int:
        """Convert ``amount`` expressed in ``source`` into this unit.

        Conversion to a coarser unit truncates.

        Raises:
            TypeError: If amount is not an int
            ValueError: If amount is negative
            OverflowError: If the nanosecond intermediate exceeds 2**64 - 1
        """
        return source.to_nanos(amount) // self.nanos

    def to_nanos(self, amount: int) -> int:
        nanos = check_amount(amount) * self.nanos
        if nanos > U64_MAX:
            raise OverflowError(
                f"{amount} {self.value} is {nanos} nanoseconds, "
                f"which exceeds the unsigned 64-bit range ({U64_MAX}).\n"
                f"Hint: Convert from a coarser unit or split the amount"
            )
        return nanos

    def to_micros(self, amount: int) -> int:
        return TimeUnit.MICROSECONDS.convert(amount, self)

    def to_millis(self, amount: int) -> int:
        return TimeUnit.MILLISECONDS.convert(amount, self)

    def to_seconds(self, amount: int) -> int:
        return TimeUnit.SECONDS.convert(amount, self)

    def to_minutes(self, amount: int) -> int:
        return TimeUnit.MINUTES.convert(amount, self)

    def to_hours(self, amount: int) -> int:
        return TimeUnit.HOURS.convert(amount, self)

    def to_days(self, amount: int) -> int:
        return TimeUnit.DAYS.convert(amount, self)

    def to_duration(self, amount: int) -> timedelta:
        """Return a fixed-length duration of ``amount`` units.

        timedelta resolves to microseconds; any sub-microsecond remainder
        is truncated.
        """
        return timedelta(microseconds=self.to_micros(amount))

    def to_chrono_duration(self, amount: int) -> relativedelta:
        """Return a calendar-aware duration of ``amount`` units.

        The relativedelta is normalized, so 90 minutes comes back as
        ``relativedelta(hours=+1, minutes=+30)``. Days are never folded
        into months.
        """
        return relativedelta(microseconds=self.to_micros(amount))

    def sleep(self, amount: int) -> None:
        """Block the calling thread for at least ``amount`` units."""
        duration = self.to_duration(amount)
        logger.debug(f"Sleeping {amount} {self.value} ({duration})")
        time.sleep(duration.total_seconds())

    def closure_sleep(
        self, amount: int, callback: Callable[[timedelta], Any]
    ) -> None:
        """Hand a timedelta of ``amount`` units to ``callback``.

        The callback decides whether and how to block; it is called exactly
        once, and this method returns after it does.

        Example:
            >>> TimeUnit.SECONDS.closure_sleep(2, lambda d: time.sleep(d.total_seconds()))
        """
        duration = self.to_duration(amount)
        logger.debug(f"Delegating wait of {amount} {self.value} ({duration})")
        callback(duration)

    def closure_chrono_sleep(
        self, amount: int, callback: Callable[[relativedelta], Any]
    ) -> None:
        """Same as closure_sleep(), but passes a relativedelta."""
        duration = self.to_chrono_duration(amount)
        logger.debug(f"Delegating wait of {amount} {self.value} ({duration!r})")
        callback(duration)


_NANOS: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: NANOS_SCALE,
    TimeUnit.MICROSECONDS: NANOS_PER_MICROSECOND,
    TimeUnit.MILLISECONDS: NANOS_PER_MILLISECOND,
    TimeUnit.SECONDS: NANOS_PER_SECOND,
    TimeUnit.MINUTES: NANOS_PER_MINUTE,
    TimeUnit.HOURS: NANOS_PER_HOUR,
    TimeUnit.DAYS: NANOS_PER_DAY,
}

_BY_NAME: dict[str, TimeUnit] = {unit.value: unit for unit in TimeUnit}
_BY_LOWER_NAME: dict[str, TimeUnit] = {
    unit.value.lower(): unit for unit in TimeUnit
}


__all__ = ["TimeUnit"]
