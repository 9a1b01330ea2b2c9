"""Display formatting helpers for declaration documents.

Covers the pt-BR conventions used in the rendered HTML:
- CPF grouping (XXX.XXX.XXX-XX)
- Calendar dates as DD/MM/YYYY
- Stay length in whole days between check-in and check-out

None of these functions raise on bad input; unparsable values degrade to
pass-through or to the documented default.
"""

import datetime as dt
import math
import re

CPF_LENGTH = 11
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DEFAULT_STAY_LENGTH = 1

_CPF_PATTERN = re.compile(r"(\d{3})(\d{3})(\d{3})(\d{2})")
_NON_DIGITS = re.compile(r"\D")
_SECONDS_PER_DAY = 24 * 60 * 60
_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.UTC)

# Tried in order after ISO-8601
_FALLBACK_DATE_FORMATS = ("%d/%m/%Y",)


def digits_only(value: str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGITS.sub("", value)


def format_cpf(cpf: str) -> str:
    """Format a digits-only CPF for display.

    The first 11 digits are grouped as XXX.XXX.XXX-XX. Shorter values are
    returned untouched. No checksum validation is performed.

    Args:
        cpf: CPF with non-digits already stripped

    Returns:
        Formatted CPF, or the input when it has fewer than 11 digits.
    """
    if len(cpf) < CPF_LENGTH:
        return cpf
    return _CPF_PATTERN.sub(r"\1.\2.\3-\4", cpf, count=1)


def parse_date(value: str) -> dt.datetime | None:
    """Parse date-like text into a datetime.

    Accepts ISO-8601 dates/datetimes (with or without offset) and
    Brazilian DD/MM/YYYY.

    Args:
        value: Raw date text

    Returns:
        Parsed datetime, or None if the text is empty or not a valid date.
    """
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        return None

    try:
        return dt.datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in _FALLBACK_DATE_FORMATS:
        try:
            return dt.datetime.strptime(text, fmt)
        except ValueError:
            continue

    return None


def format_date(value: str, tz: dt.tzinfo | None = None) -> str:
    """Render date-like text as DD/MM/YYYY.

    Args:
        value: Raw date text
        tz: Display timezone applied to offset-aware inputs

    Returns:
        Formatted date, or the original value when it cannot be parsed.
    """
    parsed = parse_date(value)
    if parsed is None:
        return value

    if parsed.tzinfo is not None and tz is not None:
        try:
            parsed = parsed.astimezone(tz)
        except OverflowError:
            pass

    return parsed.strftime(DISPLAY_DATE_FORMAT)


def _as_utc(value: dt.datetime) -> dt.datetime:
    # Naive values are taken as UTC so naive/aware pairs stay comparable
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.UTC)
    return value


def calculate_stay_length(checkin: str, checkout: str) -> int:
    """Count whole days between check-in and check-out, rounding up.

    Args:
        checkin: Raw check-in date text
        checkout: Raw check-out date text

    Returns:
        Number of days (ceiling), or 1 if either date is missing or
        unparsable, or checkout is not after checkin.
    """
    start = parse_date(checkin)
    end = parse_date(checkout)
    if start is None or end is None:
        return DEFAULT_STAY_LENGTH

    try:
        seconds = (_as_utc(end) - _as_utc(start)).total_seconds()
    except OverflowError:
        return DEFAULT_STAY_LENGTH
    days = math.ceil(seconds / _SECONDS_PER_DAY)

    return days if days > 0 else DEFAULT_STAY_LENGTH


def to_iso_timestamp(moment: dt.datetime) -> str:
    """Format an instant as ISO-8601 UTC with milliseconds and a Z suffix.

    Example: 2024-01-01T12:00:00.000Z
    """
    utc_moment = _as_utc(moment).astimezone(dt.UTC)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_epoch_millis(moment: dt.datetime) -> int:
    """Milliseconds since the Unix epoch for an instant."""
    return (_as_utc(moment) - _EPOCH) // dt.timedelta(milliseconds=1)
