from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pandas as pd


def parse_timestamp(s: str, tz: str = "UTC") -> pd.Timestamp:
    """
    Parse a datetime-like string via pandas and convert it to ``tz``.
    Naive input (the API's 'dt_txt', e.g. '2026-02-01 12:00:00') is taken
    as UTC. Raises ValueError if the string is not a datetime.
    """
    ts = pd.Timestamp(s)
    if ts is pd.NaT:
        raise ValueError(f"Not a datetime: {s!r}")
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return ts.tz_convert(tz)


def format_epoch_local(epoch: int, utc_offset_seconds: int) -> str:
    """
    Format epoch seconds as 'YYYY-MM-DD HH:MM' in a fixed UTC offset,
    as the API reports city sunrise/sunset, e.g. (1706770800, 10800)
    -> '2024-02-01 10:00'.
    """
    tz = timezone(timedelta(seconds=utc_offset_seconds))
    return datetime.fromtimestamp(epoch, tz).strftime("%Y-%m-%d %H:%M")
