from __future__ import annotations

import logging

import streamlit as st

from charts import build_forecast_figure, display_points_frame
from config import WeatherConfig
from models import City, ForecastData, ForecastItem
from transform import format_celsius, kelvin_to_celsius, to_display_points
from utils.time import format_epoch_local
from weather_api import Failed, Loading, Ready, ViewState, load_forecast


def item_lines(item: ForecastItem) -> list[str]:
    return [
        f"Date: {item.dt_txt}",
        f"Temperature: {item.main.temp} K ({format_celsius(kelvin_to_celsius(item.main.temp))} °C)",
        f"Feels Like: {item.main.feels_like} K ({format_celsius(kelvin_to_celsius(item.main.feels_like))} °C)",
        f"Weather: {item.description or 'n/a'}",
        f"Wind Speed: {item.wind.speed} m/s",
        f"Cloudiness: {item.clouds:g}%",
    ]


def city_caption(city: City) -> str:
    sunrise = format_epoch_local(city.sunrise, city.timezone)
    sunset = format_epoch_local(city.sunset, city.timezone)
    return f"Population {city.population:,} · Sunrise {sunrise} · Sunset {sunset} (local time)"


def _render_ready(data: ForecastData, config: WeatherConfig) -> None:
    st.title(f"Weather Forecast for {data.city.name}")
    st.header(f"{data.city.name}, {data.city.country}")
    st.caption(city_caption(data.city))

    st.subheader("Temperature")
    points = to_display_points(data.points())
    fig = build_forecast_figure(points, tz=config.display_timezone)
    st.plotly_chart(fig, use_container_width=True)
    st.dataframe(display_points_frame(points), use_container_width=True, hide_index=True)

    st.subheader("Forecast")
    for item in data.items:
        st.markdown("\n".join(f"- {line}" for line in item_lines(item)))
        st.divider()


def render(state: ViewState, config: WeatherConfig) -> None:
    if isinstance(state, Loading):
        st.text("Loading...")
    elif isinstance(state, Failed):
        st.error(f"Error: {state.reason}")
    elif isinstance(state, Ready):
        _render_ready(state.data, config)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title="Weather Forecast", page_icon="🌦️", layout="wide")

    config = WeatherConfig.from_env()
    placeholder = st.empty()
    with placeholder.container():
        render(Loading(), config)
    state = load_forecast(config)
    placeholder.empty()
    render(state, config)


if __name__ == "__main__":
    main()
