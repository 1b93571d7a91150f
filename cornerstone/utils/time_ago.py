"""Relative time labels for notification timestamps."""

from __future__ import annotations

import math
from datetime import datetime

from .datetime import ensure_app_timezone, now_in_app_timezone

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY


def format_time_ago(value: datetime, now: datetime | None = None) -> str:
    """Return a short label such as ``"5m ago"`` describing ``value``.

    Anything a week old or more is shown as the locale's date
    representation. Timestamps in the future are not special-cased and read
    as ``"Just now"``.
    """

    moment = ensure_app_timezone(value)
    reference = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    seconds = math.floor((reference - moment).total_seconds())

    if seconds < _MINUTE:
        return "Just now"
    if seconds < _HOUR:
        return f"{seconds // _MINUTE}m ago"
    if seconds < _DAY:
        return f"{seconds // _HOUR}h ago"
    if seconds < _WEEK:
        return f"{seconds // _DAY}d ago"
    return moment.strftime("%x")


__all__ = ["format_time_ago"]
