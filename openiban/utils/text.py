"""Small string helpers for account number handling."""

import re

_LEADING_DIGITS = re.compile(r"\s*([+-]?\d+)")
_SEPARATORS = re.compile(r"[-\s]")


def leading_int(value: str | int | None) -> int:
    """Integer value of the leading digits of ``value``; 0 when there are none.

    Account numbers can carry stray letters, so this never raises.

    Example:
        >>> leading_int("8327-9")
        8327
        >>> leading_int("ABC")
        0
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    match = _LEADING_DIGITS.match(value)
    return int(match.group(1)) if match else 0


def strip_leading_zeros(value: str) -> str:
    return value.lstrip("0")


def remove_separators(value: str) -> str:
    """Remove hyphens and whitespace."""
    return _SEPARATORS.sub("", value)
