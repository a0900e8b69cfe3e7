from __future__ import annotations

from typing import Iterable

from constants import DEFAULT_DISPLAY_TZ, KELVIN_OFFSET, TICK_HOURS
from models import DisplayPoint, ForecastPoint
from utils.time import parse_timestamp

# Fixed English abbreviations so labels never depend on the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def kelvin_to_celsius(kelvin: float) -> float:
    return round(kelvin - KELVIN_OFFSET, 2)


def format_celsius(celsius: float) -> str:
    return f"{celsius:.2f}"


def tick_label(timestamp: str, tz: str = DEFAULT_DISPLAY_TZ) -> str:
    """
    Axis label 'Mon DD HH:MM' for points at exactly 00:00 or 12:00 local
    time in ``tz``; an empty string means no tick at this point.
    """
    ts = parse_timestamp(timestamp, tz)
    if ts.hour not in TICK_HOURS or ts.minute != 0 or ts.second != 0:
        return ""
    return f"{_MONTHS[ts.month - 1]} {ts.day:02d} {ts.hour:02d}:{ts.minute:02d}"


def to_display_point(point: ForecastPoint) -> DisplayPoint:
    return DisplayPoint(
        timestamp=point.timestamp,
        temperature_c=kelvin_to_celsius(point.temperature),
        feels_like_c=kelvin_to_celsius(point.feels_like),
    )


def to_display_points(points: Iterable[ForecastPoint]) -> list[DisplayPoint]:
    # One output per input, order kept.
    return [to_display_point(p) for p in points]
