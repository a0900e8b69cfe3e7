from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from constants import DEFAULT_DISPLAY_TZ
from models import DisplayPoint
from transform import tick_label


def display_points_frame(points: Sequence[DisplayPoint]) -> pd.DataFrame:
    columns = ["timestamp", "temperature_c", "feels_like_c", "zero_reference"]
    return pd.DataFrame([asdict(p) for p in points], columns=columns)


def build_forecast_figure(
    points: Sequence[DisplayPoint], *, tz: str = DEFAULT_DISPLAY_TZ, height: int = 500
) -> go.Figure:
    fig = go.Figure()
    df = display_points_frame(points)

    if not df.empty:
        # Category axis keyed by the raw timestamp text, one slot per point
        x = df["timestamp"]
        fig.add_trace(
            go.Scatter(
                x=x,
                y=df["temperature_c"],
                mode="lines+markers",
                name="Temperature (°C)",
                line=dict(color="#1976d2"),
                marker=dict(size=6),
            )
        )
        fig.add_trace(
            go.Scatter(
                x=x,
                y=df["feels_like_c"],
                mode="lines",
                name="Feels like (°C)",
                line=dict(color="#ef6c00", dash="dot"),
            )
        )
        fig.add_trace(
            go.Scatter(
                x=x,
                y=df["zero_reference"],
                mode="lines",
                name="0 °C",
                line=dict(color="rgba(0,0,0,0.4)", width=1, dash="dash"),
                hoverinfo="skip",
            )
        )

        # Labels only at local midnight and noon; other points get no tick
        labels = [tick_label(ts, tz) for ts in df["timestamp"]]
        tickvals = [ts for ts, label in zip(df["timestamp"], labels) if label]
        ticktext = [label for label in labels if label]
        fig.update_xaxes(
            type="category",
            tickmode="array",
            tickvals=tickvals,
            ticktext=ticktext,
        )

    fig.update_layout(
        template="simple_white",
        height=height,
        margin=dict(l=40, r=20, t=40, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title="Time",
        yaxis_title="Temperature (°C)",
    )
    return fig
