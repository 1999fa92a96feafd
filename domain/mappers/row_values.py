"""
Null-handling for raw result rows.

The policy is fixed for every entity: a null string becomes "", a null
number becomes 0. Output compatibility depends on it, so mappers must not
special-case individual fields. Text that does not parse as a number also
reads as 0.
"""

from typing import Any


def as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def as_int(value: Any) -> int:
    """Integer view of a column value; fractional values are truncated"""
    if value is None:
        return 0
    try:
        if isinstance(value, str):
            value = value.strip()
            return int(float(value)) if value else 0
        return int(value)
    except (ValueError, OverflowError):
        return 0


def as_float(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        if isinstance(value, str):
            value = value.strip()
            return float(value) if value else 0.0
        return float(value)
    except ValueError:
        return 0.0
