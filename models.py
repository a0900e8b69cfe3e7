from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional

from utils.time import parse_timestamp


class WeatherError(Exception):
    """Base class for everything that can go wrong loading a forecast."""


class ForecastShapeError(WeatherError, ValueError):
    """The response JSON does not look like a forecast document."""


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if not isinstance(value, Mapping):
        raise ForecastShapeError(f"Expected object at '{key}', got {type(value).__name__}.")
    return value


def _number(payload: Mapping[str, Any], key: str) -> float:
    value = payload.get(key)
    # bool is an int subclass; never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ForecastShapeError(f"Expected number at '{key}', got {value!r}.")
    try:
        number = float(value)
    except OverflowError as e:
        raise ForecastShapeError(f"Number at '{key}' is out of range.") from e
    # JSON decoders accept NaN and Infinity
    if not math.isfinite(number):
        raise ForecastShapeError(f"Expected finite number at '{key}', got {value!r}.")
    return number


def _optional_number(payload: Mapping[str, Any], key: str) -> Optional[float]:
    if payload.get(key) is None:
        return None
    return _number(payload, key)


@dataclass(frozen=True)
class Coord:
    lat: float
    lon: float

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Coord":
        return cls(lat=_number(payload, "lat"), lon=_number(payload, "lon"))


@dataclass(frozen=True)
class City:
    id: int
    name: str
    coord: Coord
    country: str
    population: int
    timezone: int  # offset from UTC in seconds
    sunrise: int
    sunset: int

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "City":
        name = payload.get("name")
        if not isinstance(name, str):
            raise ForecastShapeError("City name is missing.")
        return cls(
            id=int(_number(payload, "id")),
            name=name,
            coord=Coord.from_dict(_section(payload, "coord")),
            country=str(payload.get("country") or ""),
            population=int(_optional_number(payload, "population") or 0),
            timezone=int(_optional_number(payload, "timezone") or 0),
            sunrise=int(_number(payload, "sunrise")),
            sunset=int(_number(payload, "sunset")),
        )


@dataclass(frozen=True)
class Main:
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float
    humidity: float
    sea_level: Optional[float] = None
    grnd_level: Optional[float] = None
    temp_kf: Optional[float] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Main":
        return cls(
            temp=_number(payload, "temp"),
            feels_like=_number(payload, "feels_like"),
            temp_min=_number(payload, "temp_min"),
            temp_max=_number(payload, "temp_max"),
            pressure=_number(payload, "pressure"),
            humidity=_number(payload, "humidity"),
            sea_level=_optional_number(payload, "sea_level"),
            grnd_level=_optional_number(payload, "grnd_level"),
            temp_kf=_optional_number(payload, "temp_kf"),
        )


@dataclass(frozen=True)
class WeatherCondition:
    id: int
    main: str
    description: str
    icon: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "WeatherCondition":
        return cls(
            id=int(_number(payload, "id")),
            main=str(payload.get("main") or ""),
            description=str(payload.get("description") or ""),
            icon=str(payload.get("icon") or ""),
        )


@dataclass(frozen=True)
class Wind:
    speed: float
    deg: float
    gust: Optional[float] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Wind":
        return cls(
            speed=_number(payload, "speed"),
            deg=_number(payload, "deg"),
            gust=_optional_number(payload, "gust"),
        )


@dataclass(frozen=True)
class ForecastPoint:
    timestamp: str
    temperature: float  # Kelvin
    feels_like: float  # Kelvin


@dataclass(frozen=True)
class DisplayPoint:
    timestamp: str
    temperature_c: float
    feels_like_c: float
    zero_reference: float = 0.0


@dataclass(frozen=True)
class ForecastItem:
    dt: int
    dt_txt: str
    main: Main
    weather: tuple[WeatherCondition, ...]
    clouds: float  # cloudiness, %
    wind: Wind
    pod: str = ""  # part of day, "d" or "n"
    visibility: Optional[float] = None
    pop: float = 0.0  # probability of precipitation, 0..1

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ForecastItem":
        dt_txt = payload.get("dt_txt")
        if not isinstance(dt_txt, str):
            raise ForecastShapeError("Forecast item has no 'dt_txt'.")
        try:
            parse_timestamp(dt_txt)
        except (ValueError, TypeError) as e:
            raise ForecastShapeError(f"Unparseable 'dt_txt': {dt_txt!r}.") from e
        raw_weather = payload.get("weather") or []
        if not isinstance(raw_weather, list):
            raise ForecastShapeError("Expected list at 'weather'.")
        if not all(isinstance(w, Mapping) for w in raw_weather):
            raise ForecastShapeError("Weather conditions must be JSON objects.")
        sys_section = payload.get("sys") or {}
        if not isinstance(sys_section, Mapping):
            raise ForecastShapeError("Expected object at 'sys'.")
        return cls(
            dt=int(_number(payload, "dt")),
            dt_txt=dt_txt,
            main=Main.from_dict(_section(payload, "main")),
            weather=tuple(WeatherCondition.from_dict(w) for w in raw_weather),
            clouds=_number(_section(payload, "clouds"), "all"),
            wind=Wind.from_dict(_section(payload, "wind")),
            pod=str(sys_section.get("pod") or ""),
            visibility=_optional_number(payload, "visibility"),
            pop=_optional_number(payload, "pop") or 0.0,
        )

    @property
    def description(self) -> Optional[str]:
        """Description of the primary weather condition, None if the API sent none."""
        if not self.weather:
            return None
        return self.weather[0].description

    def to_point(self) -> ForecastPoint:
        return ForecastPoint(
            timestamp=self.dt_txt,
            temperature=self.main.temp,
            feels_like=self.main.feels_like,
        )


@dataclass(frozen=True)
class ForecastData:
    cod: str
    message: float
    cnt: int
    items: tuple[ForecastItem, ...]
    city: City

    @classmethod
    def from_dict(cls, payload: Any) -> "ForecastData":
        if not isinstance(payload, Mapping):
            raise ForecastShapeError("Forecast document must be a JSON object.")
        raw_items = payload.get("list")
        if not isinstance(raw_items, list):
            raise ForecastShapeError("Expected list at 'list'.")
        items = []
        for raw in raw_items:
            if not isinstance(raw, Mapping):
                raise ForecastShapeError("Forecast items must be JSON objects.")
            items.append(ForecastItem.from_dict(raw))
        return cls(
            cod=str(payload.get("cod", "")),
            message=_optional_number(payload, "message") or 0.0,
            cnt=int(_optional_number(payload, "cnt") or len(items)),
            items=tuple(items),
            city=City.from_dict(_section(payload, "city")),
        )

    def points(self) -> Iterator[ForecastPoint]:
        for item in self.items:
            yield item.to_point()
