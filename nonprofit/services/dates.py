"""Normalize free-form date strings from the website forms to calendar dates."""

from datetime import UTC, date, datetime

# Tried in order after ISO-8601; the forms send ISO most of the time.
DATE_FORMATS = (
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d %Y",
    "%b %d %Y",
)


class InvalidDateError(ValueError):
    """Raised when a value cannot be read as a calendar date."""


def normalize_date(value: str | date | datetime) -> date:
    """
    Return the calendar date for value.

    Datetimes carrying an offset are converted to UTC first, so
    "2025-03-01T23:30:00-05:00" becomes 2025-03-02. Naive datetimes keep
    their own date.
    """
    if isinstance(value, datetime):
        return _datetime_to_date(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"Unsupported date value: {value!r}")

    s = value.strip()
    if not s:
        raise InvalidDateError("Date is empty")

    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return _datetime_to_date(datetime.fromisoformat(s.replace("Z", "+00:00")))
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise InvalidDateError(f"Unrecognized date: {value!r}")


def _datetime_to_date(dt: datetime) -> date:
    if dt.tzinfo is not None:
        dt = dt.astimezone(UTC)
    return dt.date()
