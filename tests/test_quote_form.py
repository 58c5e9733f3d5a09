import pytest

from quote_calculator.config.settings import Settings
from quote_calculator.engine import ClientEntry
from quote_calculator.services.quote_form import (
    StatusMessage, clamp_client_count, format_currency, resize_clients,
)


@pytest.mark.parametrize("value,expected", [
    (0, 1), (1, 1), (12, 12), (50, 50), (51, 50), (-4, 1), ("7", 7), ("abc", 1), (None, 1),
])
def test_clamp_client_count(value, expected):
    assert clamp_client_count(value, Settings()) == expected


def test_clamp_uses_configured_bounds():
    assert clamp_client_count(30, Settings(min_clients=2, max_clients=10)) == 10
    assert clamp_client_count(1, Settings(min_clients=2, max_clients=10)) == 2


def test_resize_keeps_existing_rows():
    rows = [ClientEntry("A", "silver", 3, 1), ClientEntry("B", "bronze", 0, 2)]
    grown = resize_clients(rows, 4)

    assert grown[:2] == rows
    assert grown[2] == ClientEntry(name="", tier="gold", transactions=0, statements=0)
    assert len(grown) == 4


def test_resize_truncates():
    rows = [ClientEntry(str(i)) for i in range(5)]
    assert [c.name for c in resize_clients(rows, 2)] == ["0", "1"]


def test_status_message_expires():
    msg = StatusMessage.error("Please enter a company name")
    assert msg.kind == "error"
    assert msg.is_visible(now=msg.created_at + 2.9, duration=3)
    assert not msg.is_visible(now=msg.created_at + 3.0, duration=3)


def test_status_message_default_duration_from_settings():
    msg = StatusMessage.success("done")
    assert msg.is_visible(now=msg.created_at + 2.0)
    assert not msg.is_visible(now=msg.created_at + 3.5)


@pytest.mark.parametrize("value,expected", [
    (464.0, "R464"),
    (1234.5, "R1,234.5"),
    (1234567, "R1,234,567"),
    (0.1 + 0.2, "R0.3"),
    (-54, "-R54"),
])
def test_format_currency(value, expected):
    assert format_currency(value, "R") == expected


def test_format_currency_uses_settings_symbol():
    assert format_currency(10) == "R10"
