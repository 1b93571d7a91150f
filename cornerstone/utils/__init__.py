"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)
from .time_ago import format_time_ago

__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "format_time_ago",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
