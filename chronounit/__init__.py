from importlib.resources import files

from .formatter import (
    DateTimeFormatter,
    DefaultDateTimeFormatter,
    format_date_time_utc,
    format_date_time_utc_default,
    format_naive_date_time,
    format_naive_date_time_default,
    format_naive_date_time_utc,
    format_naive_date_time_utc_default,
)
from .pattern import DateTimePattern
from .timeunit import TimeUnit

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "TimeUnit",
    "DateTimePattern",
    "DateTimeFormatter",
    "DefaultDateTimeFormatter",
    "format_date_time_utc_default",
    "format_naive_date_time_utc_default",
    "format_naive_date_time_default",
    "format_date_time_utc",
    "format_naive_date_time_utc",
    "format_naive_date_time",
    "docs",
]
