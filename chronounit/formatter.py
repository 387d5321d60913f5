"""Date-time formatting through named patterns.

DateTimeFormatter supplies six formatting methods: three input kinds
(aware datetime, naive datetime, naive datetime read as UTC), each with
the formatter's default pattern or an explicit one. Module-level
functions of the same names cover the common case of not holding a
formatter at all.

Example:
    >>> from datetime import datetime
    >>> from chronounit import DateTimePattern, DefaultDateTimeFormatter
    >>>
    >>> ndt = datetime(2024, 3, 1, 2, 3, 4)
    >>> dtf = DefaultDateTimeFormatter.builtin()
    >>> dtf.format_naive_date_time_default(ndt)
    '2024-03-01 02:03:04'
    >>> dtf.of_pattern(DateTimePattern.HH_MM_SS).format_naive_date_time_default(ndt)
    '02:03:04'
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Literal, override

from chronounit.pattern import DateTimePattern


class DateTimeFormatter(ABC):

    @abstractmethod
    def of_pattern(self, pattern: DateTimePattern) -> "DateTimeFormatter":
        """Return a formatter whose default pattern is ``pattern``."""
        pass

    @abstractmethod
    def activated_pattern(self) -> DateTimePattern:
        """Return the default pattern of this formatter."""
        pass

    def format_date_time_utc_default(self, value: datetime) -> str:
        return self.format_date_time_utc(value, self.activated_pattern())

    def format_date_time_utc(self, value: datetime, pattern: DateTimePattern) -> str:
        """Format a timezone-aware datetime, rendered in UTC.

        Raises:
            TypeError: If value is naive or not a datetime
        """
        aware = _require_datetime(value, "aware")
        return pattern.render(aware.astimezone(timezone.utc))

    def format_naive_date_time_default(self, value: datetime) -> str:
        return self.format_naive_date_time(value, self.activated_pattern())

    def format_naive_date_time(self, value: datetime, pattern: DateTimePattern) -> str:
        """Format a naive datetime as-is, in whatever zone the caller assumes.

        Raises:
            TypeError: If value is aware or not a datetime
        """
        return pattern.render(_require_datetime(value, "naive"))

    def format_naive_date_time_utc_default(self, value: datetime) -> str:
        return self.format_naive_date_time_utc(value, self.activated_pattern())

    def format_naive_date_time_utc(
        self, value: datetime, pattern: DateTimePattern
    ) -> str:
        """Format a naive datetime, reading it as a UTC wall-clock time."""
        naive = _require_datetime(value, "naive")
        return self.format_date_time_utc(naive.replace(tzinfo=timezone.utc), pattern)


@dataclass(frozen=True)
class DefaultDateTimeFormatter(DateTimeFormatter):
    """Formatter holding a single default pattern.

    Instances are immutable: of_pattern() returns a new formatter and leaves
    the receiver untouched, so one formatter can be shared freely.
    """

    pattern: DateTimePattern

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, DateTimePattern):
            raise TypeError(
                f"Formatter pattern must be a DateTimePattern.\n"
                f"Got {type(self.pattern).__name__!r}: {self.pattern!r}\n"
                f"Hint: Look up templates or names first:\n"
                f"  DateTimePattern.value_of('%Y-%m-%d')\n"
                f"  DateTimePattern.name_of('YYYY_MM_DD')"
            )

    @classmethod
    def builtin(cls) -> "DefaultDateTimeFormatter":
        """Formatter defaulting to ``YYYY_MM_DD_HH_MM_SS``."""
        return cls(DateTimePattern.YYYY_MM_DD_HH_MM_SS)

    @override
    def of_pattern(self, pattern: DateTimePattern) -> "DefaultDateTimeFormatter":
        return replace(self, pattern=pattern)

    @override
    def activated_pattern(self) -> DateTimePattern:
        return self.pattern


def _require_datetime(value: datetime, kind: Literal["aware", "naive"]) -> datetime:
    """Check that value is a datetime of the expected kind and return it."""
    if not isinstance(value, datetime):
        raise TypeError(
            f"Expected a {kind} datetime.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: Parse strings first, e.g. datetime.fromisoformat(...)"
        )
    if kind == "aware" and value.tzinfo is None:
        raise TypeError(
            f"Expected a timezone-aware datetime.\n"
            f"Got naive datetime: {value!r}\n"
            f"Hint: Attach a zone, or use format_naive_date_time_utc():\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )
    if kind == "naive" and value.tzinfo is not None:
        raise TypeError(
            f"Expected a naive datetime.\n"
            f"Got aware datetime: {value!r}\n"
            f"Hint: Use format_date_time_utc() for aware datetimes"
        )
    return value


_BUILTIN = DefaultDateTimeFormatter.builtin()


def format_date_time_utc_default(value: datetime) -> str:
    """Format an aware datetime in UTC with ``YYYY_MM_DD_HH_MM_SS``.

    Example:
        >>> format_date_time_utc_default(datetime(2024, 3, 12, 22, 55, tzinfo=timezone.utc))
        '2024-03-12 22:55:00'
    """
    return _BUILTIN.format_date_time_utc_default(value)


def format_naive_date_time_utc_default(value: datetime) -> str:
    """Format a naive datetime, read as UTC, with ``YYYY_MM_DD_HH_MM_SS``."""
    return _BUILTIN.format_naive_date_time_utc_default(value)


def format_naive_date_time_default(value: datetime) -> str:
    """Format a naive datetime as-is with ``YYYY_MM_DD_HH_MM_SS``."""
    return _BUILTIN.format_naive_date_time_default(value)


def format_date_time_utc(value: datetime, pattern: DateTimePattern) -> str:
    """Format an aware datetime in UTC with ``pattern``.

    Example:
        >>> dt = datetime(2024, 3, 12, 22, 55, tzinfo=timezone.utc)
        >>> format_date_time_utc(dt, DateTimePattern.YYYY_MM_DD)
        '2024-03-12'
        >>> format_date_time_utc(dt, DateTimePattern.HH_MM_SS)
        '22:55:00'
    """
    return _BUILTIN.format_date_time_utc(value, pattern)


def format_naive_date_time_utc(value: datetime, pattern: DateTimePattern) -> str:
    return _BUILTIN.format_naive_date_time_utc(value, pattern)


def format_naive_date_time(value: datetime, pattern: DateTimePattern) -> str:
    return _BUILTIN.format_naive_date_time(value, pattern)


__all__ = [
    "DateTimeFormatter",
    "DefaultDateTimeFormatter",
    "format_date_time_utc_default",
    "format_naive_date_time_utc_default",
    "format_naive_date_time_default",
    "format_date_time_utc",
    "format_naive_date_time_utc",
    "format_naive_date_time",
]
