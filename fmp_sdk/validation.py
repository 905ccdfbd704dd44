"""Input checks applied before a request leaves the process."""

from __future__ import annotations

import re
from datetime import date

from fmp_sdk.errors import FMPValidationError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date(value: str, param_name: str = "date") -> None:
    """Require a real calendar date in YYYY-MM-DD form.

    Raises:
        FMPValidationError: On a malformed or impossible date (e.g. 2024-99-99).
    """
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise FMPValidationError(
            f"{param_name} must be in YYYY-MM-DD format, received: {value}"
        )
    try:
        date.fromisoformat(value)
    except ValueError as e:
        raise FMPValidationError(f"{param_name} is not a valid date: {value}") from e


def validate_symbol(symbol: str | None) -> None:
    """Reject empty or whitespace-only symbols."""
    if not symbol or not symbol.strip():
        raise FMPValidationError("Symbol cannot be empty")


def validate_date_range(from_date: str | None = None, to_date: str | None = None) -> None:
    """Validate both ends of an optional range and their order."""
    if from_date:
        validate_date(from_date, "from")
    if to_date:
        validate_date(to_date, "to")

    # ISO dates compare correctly as strings
    if from_date and to_date and from_date > to_date:
        raise FMPValidationError(
            f"'from' date ({from_date}) cannot be after 'to' date ({to_date})"
        )
