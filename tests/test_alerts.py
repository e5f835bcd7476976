import pytest

from weatherbridge.weather.utils.alerts import AlertClassifier


@pytest.mark.parametrize(
    "tags, expected",
    [
        (["Extreme temperature value"], 4),
        (["Severe", "Extreme"], 4),
        (["Thunderstorm", "Severe"], 3),
        (["SEVERE weather"], 3),
        (["Flood"], 2),
        ([], 2),
        (None, 3),
    ],
)
def test_severity_from_tags(tags: list[str] | None, expected: int) -> None:
    assert AlertClassifier.severity(tags) == expected


@pytest.mark.parametrize(
    "event, expected",
    [
        ("Tornado Warning", "TOR"),
        ("Severe Thunderstorm Watch", "SVR"),
        ("Flash Flood Warning", "FLO"),
        ("Winter Storm Warning", "WIN"),
        ("Heat Advisory", "WEA"),
        ("", "WEA"),
        (None, "WEA"),
    ],
)
def test_message_type_from_event(event: str | None, expected: str) -> None:
    assert AlertClassifier.message_type(event) == expected
