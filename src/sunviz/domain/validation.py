# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Boundary validation for the public solar operations.

One error kind, InvalidInputError, names the argument that failed.
Values are rejected, never clamped.
"""
import math
import numbers
from datetime import date, datetime, timezone, tzinfo


class InvalidInputError(ValueError):
    """Caller-supplied input outside the domain of a solar operation.

    Attributes:
        field: Name of the offending argument (e.g. ``"latitude"``).
        value: The rejected value.
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {reason}, got {value!r}")


def _is_real_number(value: object) -> bool:
    # numbers.Real covers numpy scalars as well as int and float.
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def require_finite(field: str, value: object) -> float:
    """Return value as float, or raise if it is not a finite number."""
    if not _is_real_number(value):
        raise InvalidInputError(field, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidInputError(field, value, "must be finite")
    return float(value)


def require_range(field: str, value: object, low: float, high: float) -> float:
    """Return value as float, or raise if it is not finite and within [low, high]."""
    v = require_finite(field, value)
    if not low <= v <= high:
        raise InvalidInputError(field, value, f"must be within [{low:g}, {high:g}]")
    return v


def validate_latitude(latitude_deg: object) -> float:
    return require_range("latitude", latitude_deg, -90.0, 90.0)


def validate_longitude(longitude_deg: object) -> float:
    return require_range("longitude", longitude_deg, -180.0, 180.0)


def validate_instant(instant: object) -> datetime:
    """
    Normalize an instant to an aware UTC datetime.

    Accepts a datetime (naive taken as UTC) or a POSIX timestamp in
    seconds. Non-finite or unrepresentable timestamps are rejected.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            return instant.replace(tzinfo=timezone.utc)
        try:
            return instant.astimezone(timezone.utc)
        except OverflowError as e:
            raise InvalidInputError("instant", instant, "is outside the supported date range") from e
    if not _is_real_number(instant):
        raise InvalidInputError("instant", instant, "must be a datetime or POSIX timestamp")
    seconds = require_finite("instant", instant)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInputError("instant", instant, "is outside the supported date range") from e


def validate_date(day: object) -> date:
    """Return a plain calendar date; datetimes are reduced to their date."""
    if isinstance(day, datetime):
        return day.date()
    if not isinstance(day, date):
        raise InvalidInputError("date", day, "must be a datetime.date")
    return day


def validate_tz(tz: object) -> tzinfo:
    if not isinstance(tz, tzinfo):
        raise InvalidInputError("tz", tz, "must be a datetime.tzinfo")
    return tz
