"""Utility constants and helpers for chronounit.

Scale constants express every time unit as a count of nanoseconds.
They are used throughout the API for consistent conversion arithmetic.
"""

ZERO = 0
ONE = 1
THOUSAND = 1000

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

# Scale constants (all values in nanoseconds)
NANOS_SCALE = ONE
MICROSECOND_SCALE = THOUSAND * NANOS_SCALE
MILLISECOND_SCALE = THOUSAND * MICROSECOND_SCALE
SECOND_SCALE = THOUSAND * MILLISECOND_SCALE
MINUTE_SCALE = SECONDS_PER_MINUTE * SECOND_SCALE
HOUR_SCALE = MINUTES_PER_HOUR * MINUTE_SCALE
DAY_SCALE = HOURS_PER_DAY * HOUR_SCALE

NANOS_PER_MICROSECOND = MICROSECOND_SCALE
NANOS_PER_MILLISECOND = MILLISECOND_SCALE
NANOS_PER_SECOND = SECOND_SCALE
NANOS_PER_MINUTE = MINUTE_SCALE
NANOS_PER_HOUR = HOUR_SCALE
NANOS_PER_DAY = DAY_SCALE

# Largest magnitude a conversion may produce (unsigned 64-bit)
U64_MAX = 2**64 - 1


def check_amount(amount: int) -> int:
    """Validate a unit magnitude, returning it unchanged.

    Raises:
        TypeError: If amount is not an int (bool is rejected too)
        ValueError: If amount is negative
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(
            f"Time unit amount must be an int.\n"
            f"Got {type(amount).__name__!r}: {amount!r}\n"
            f"Hint: Round or truncate first, e.g. TimeUnit.SECONDS.to_millis(int(x))"
        )
    if amount < ZERO:
        raise ValueError(
            f"Time unit amount must be >= 0, got {amount}\n"
            f"Hint: Amounts are unsigned magnitudes; track direction separately"
        )
    return amount
