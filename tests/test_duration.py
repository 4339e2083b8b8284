import pytest

from playlist_duration.duration import Duration, format_duration, parse_duration


@pytest.mark.parametrize(
    "encoded, expected",
    [
        ("PT1H2M3S", 3723),
        ("PT45S", 45),
        ("PT10M", 600),
        ("PT2H", 7200),
        ("PT1H30S", 3630),
        ("P1DT2H", 93600),
        ("P0D", 0),
        ("pt1m5s", 65),
        ("PT", 0),
        ("garbage", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_duration(encoded, expected):
    assert parse_duration(encoded) == expected


def test_parse_duration_never_raises_on_non_string():
    assert parse_duration(42) == 0


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0m 0s"),
        (45, "0m 45s"),
        (600, "10m 0s"),
        (3599, "59m 59s"),
        (3600, "1h 0m 0s"),
        (3723, "1h 2m 3s"),
        (90061, "25h 1m 1s"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (90061, "1d 1h 1m 1s"),
        (86405, "1d 0h 0m 5s"),
        (86399, "23h 59m 59s"),
        (45, "0m 45s"),
    ],
)
def test_format_duration_with_days(seconds, expected):
    assert format_duration(seconds, show_days=True) == expected


def test_format_duration_rejects_negative_values():
    with pytest.raises(ValueError):
        format_duration(-1)


def test_duration_value_type():
    total = Duration.parse("PT1M") + Duration.parse("PT2M30S")

    assert total == Duration(210)
    assert str(total) == "3m 30s"
    assert total.scaled(2).seconds == 105
    assert total.scaled(0.75).seconds == 280


def test_duration_scaled_rounds_half_up():
    assert Duration(3).scaled(2) == Duration(2)


def test_duration_scaled_rejects_non_positive_speed():
    with pytest.raises(ValueError):
        Duration(10).scaled(0)
