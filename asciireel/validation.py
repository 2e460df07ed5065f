"""Validation of numeric and time-of-day command-line values."""

_DIGITS = frozenset("0123456789")


def is_valid_integer(text):
    """Return True if ``text`` is non-empty and made only of ASCII digits."""
    if not text:
        return False
    return all(char in _DIGITS for char in text)


def _two_digits(part, limit):
    return len(part) == 2 and is_valid_integer(part) and int(part) <= limit


def is_valid_timestamp(text):
    """Return True if ``text`` is a valid ``HH:MM:SS`` time of day."""
    if text is None or len(text) != 8:
        return False
    if text[2] != ":" or text[5] != ":":
        return False
    hours, minutes, seconds = text[0:2], text[3:5], text[6:8]
    return (
        _two_digits(hours, 23)
        and _two_digits(minutes, 59)
        and _two_digits(seconds, 59)
    )