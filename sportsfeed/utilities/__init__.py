"""Shared utilities."""

from sportsfeed.utilities.links import build_watch_link, encode_uri_component
from sportsfeed.utilities.time_format import format_clock_time, parse_iso_datetime

__all__ = [
    "build_watch_link",
    "encode_uri_component",
    "format_clock_time",
    "parse_iso_datetime",
]
