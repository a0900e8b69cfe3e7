import pytest

from models import DisplayPoint, ForecastPoint
from transform import format_celsius, kelvin_to_celsius, tick_label, to_display_points


def test_kelvin_to_celsius_known_values():
    assert kelvin_to_celsius(273.15) == 0.0
    assert kelvin_to_celsius(300) == 26.85
    assert kelvin_to_celsius(0) == -273.15


def test_kelvin_to_celsius_rounds_to_two_places():
    assert kelvin_to_celsius(280.12345) == 6.97
    assert kelvin_to_celsius(263.149) == -10.0


@pytest.mark.parametrize("kelvin, text", [(273.15, "0.00"), (300, "26.85"), (283.15, "10.00"), (250.1, "-23.05")])
def test_format_celsius_always_two_fraction_digits(kelvin, text):
    assert format_celsius(kelvin_to_celsius(kelvin)) == text


def test_tick_label_midnight_and_noon():
    midnight = tick_label("2024-05-01 00:00:00")
    noon = tick_label("2024-05-01 12:00:00")
    assert midnight == "May 01 00:00"
    assert "00:00" in midnight
    assert noon == "May 01 12:00"


def test_tick_label_suppressed_off_hours():
    assert tick_label("2024-05-01 03:00:00") == ""
    assert tick_label("2024-05-01 12:30:00") == ""


def test_tick_label_uses_display_timezone():
    # 21:00 UTC is midnight in Moscow (UTC+3)
    assert tick_label("2024-05-01 21:00:00", "Europe/Moscow") == "May 02 00:00"
    assert tick_label("2024-05-01 00:00:00", "Europe/Moscow") == ""


def test_tick_label_respects_explicit_offset():
    assert tick_label("2024-05-01T15:00:00+03:00") == "May 01 12:00"


def test_tick_label_is_deterministic():
    assert tick_label("2024-12-31 12:00:00") == tick_label("2024-12-31 12:00:00") == "Dec 31 12:00"


def test_to_display_points_keeps_order_and_count():
    points = [
        ForecastPoint("2024-02-01 03:00:00", 300.0, 299.0),
        ForecastPoint("2024-02-01 00:00:00", 273.15, 270.0),
        ForecastPoint("2024-02-01 06:00:00", 280.0, 278.5),
    ]
    out = to_display_points(points)
    assert len(out) == len(points)
    assert [p.timestamp for p in out] == [p.timestamp for p in points]
    assert out[0] == DisplayPoint("2024-02-01 03:00:00", 26.85, 25.85, 0.0)
    assert all(p.zero_reference == 0 for p in out)


def test_to_display_points_empty():
    assert to_display_points([]) == []
