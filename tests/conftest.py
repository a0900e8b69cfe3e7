import sys
from pathlib import Path

import pytest


# Ensure the project root (parent of this file) is importable when running pytest from repo root
THIS_DIR = Path(__file__).resolve().parent
ROOT_DIR = THIS_DIR.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


def make_item(dt_txt, temp, feels_like, weather=None):
    return {
        "dt": 1706788800,
        "main": {
            "temp": temp,
            "feels_like": feels_like,
            "temp_min": temp - 1,
            "temp_max": temp + 1,
            "pressure": 1012,
            "sea_level": 1012,
            "grnd_level": 995,
            "humidity": 81,
            "temp_kf": 0.4,
        },
        "weather": [{"id": 600, "main": "Snow", "description": "light snow", "icon": "13n"}]
        if weather is None
        else weather,
        "clouds": {"all": 100},
        "wind": {"speed": 4.2, "deg": 230, "gust": 9.1},
        "visibility": 10000,
        "pop": 0.35,
        "sys": {"pod": "n"},
        "dt_txt": dt_txt,
    }


@pytest.fixture()
def forecast_payload():
    items = [
        make_item("2024-02-01 00:00:00", 268.15, 262.4),
        make_item("2024-02-01 03:00:00", 267.5, 261.9),
        make_item("2024-02-01 12:00:00", 273.15, 269.0),
        make_item("2024-02-01 15:00:00", 274.0, 270.2),
    ]
    return {
        "cod": "200",
        "message": 0,
        "cnt": len(items),
        "list": items,
        "city": {
            "id": 553915,
            "name": "Kaluga",
            "coord": {"lat": 54.5293, "lon": 36.2754},
            "country": "RU",
            "population": 338978,
            "timezone": 10800,
            "sunrise": 1706763600,
            "sunset": 1706795400,
        },
    }
