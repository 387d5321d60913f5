"""Named date-time output layouts.

Each DateTimePattern member carries one strftime-style template. Two
directives extend the usual strftime set:

    %.3f - dot followed by zero-padded milliseconds (".789")
    %s   - whole Unix seconds; naive datetimes are read as UTC

Month names, weekday names and AM/PM are always rendered in English,
independent of the process locale. Years always render with four digits.

Examples:
    >>> from datetime import datetime
    >>> DateTimePattern.YYYY_MM_DD.render(datetime(2024, 3, 1, 2, 3, 4))
    '2024-03-01'
    >>> DateTimePattern.value_of("%H:%M:%S")
    <DateTimePattern.HH_MM_SS: '%H:%M:%S'>
"""

import calendar
import re
from datetime import datetime
from enum import Enum

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Directives expanded here before handing the template to strftime
_LOCAL_DIRECTIVES = re.compile(r"%\.3f|%[YBbAap]")


class DateTimePattern(Enum):
    """Closed set of output layouts, valued by their templates."""

    YYYY_MM_DD = "%Y-%m-%d"
    MM_DD_YYYY = "%m/%d/%Y"
    DD_MM_YYYY = "%d-%m-%Y"

    YYYY_MM_DD_HH_MM = "%Y-%m-%d %H:%M"
    YYYY_MM_DD_HH_MM_SS = "%Y-%m-%d %H:%M:%S"
    YYYY_MM_DD_HH_MM_SS_SSS = "%Y-%m-%d %H:%M:%S%.3f"

    HH_MM = "%H:%M"
    HH_MM_SS = "%H:%M:%S"

    MONTH_FULL = "%B"
    MONTH_ABBR = "%b"

    WEEKDAY_FULL = "%A"
    WEEKDAY_ABBR = "%a"

    AM_PM = "%p"

    TIMESTAMP = "%s"

    def pattern_of(self) -> str:
        """Return the literal template of this pattern."""
        return self.value

    @classmethod
    def value_of(cls, template: str) -> "DateTimePattern | None":
        """Return the pattern whose template is exactly ``template``, else None."""
        if not isinstance(template, str):
            return None
        return _BY_TEMPLATE.get(template)

    @classmethod
    def name_of(cls, name: str) -> "DateTimePattern | None":
        """Return the pattern whose member name is ``name``, else None."""
        if not isinstance(name, str):
            return None
        return cls.__members__.get(name)

    def render(self, value: datetime) -> str:
        """Render ``value`` through this pattern's template.

        The datetime is rendered in whatever zone it carries; callers wanting
        UTC output convert first (see chronounit.formatter).
        """
        if self is DateTimePattern.TIMESTAMP:
            # utctimetuple() leaves naive values untouched, i.e. reads them as UTC
            return str(calendar.timegm(value.utctimetuple()))

        template = _LOCAL_DIRECTIVES.sub(
            lambda match: _expand_directive(match.group(), value), self.value
        )
        return value.strftime(template)


def _expand_directive(directive: str, value: datetime) -> str:
    if directive == "%Y":
        return f"{value.year:04d}"
    if directive == "%.3f":
        return f".{value.microsecond // 1000:03d}"
    if directive in ("%B", "%b"):
        month = _MONTH_NAMES[value.month - 1]
        return month if directive == "%B" else month[:3]
    if directive in ("%A", "%a"):
        weekday = _WEEKDAY_NAMES[value.weekday()]
        return weekday if directive == "%A" else weekday[:3]
    # %p
    return "AM" if value.hour < 12 else "PM"


_BY_TEMPLATE: dict[str, DateTimePattern] = {
    pattern.value: pattern for pattern in DateTimePattern
}


__all__ = ["DateTimePattern"]
