"""Utility helpers for reusable functionality."""

from .datetime import now_iso_timestamp, to_iso_timestamp

__all__ = ["now_iso_timestamp", "to_iso_timestamp"]
