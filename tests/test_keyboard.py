import pytest

from slbar.keyboard import format_indicators, get_layout, valid_layout_or_variant

SYMBOLS = "pc+us+ru:2+inet(evdev)"


def test_indicators_optional_hidden_when_off():
    assert format_indicators("c?n?", 0) == ""


def test_indicators_optional_shown_when_on():
    assert format_indicators("c?n?", 3) == "cn"
    assert format_indicators("C?N?", 3) == "CN"


def test_indicators_toggle_case():
    assert format_indicators("cn", 0) == "cn"
    assert format_indicators("cn", 3) == "CN"
    assert format_indicators("CN", 1) == "Cn"


def test_indicators_only_first_four_chars():
    assert format_indicators("xxxxc", 1) == ""


def test_indicators_ignores_other_letters():
    assert format_indicators("xcy", 0) == "c"


@pytest.mark.parametrize("sym", ["evdev", "inet(evdev)", "pc", "pc105", "base"])
def test_invalid_symbols(sym):
    assert valid_layout_or_variant(sym) is False


@pytest.mark.parametrize("sym", ["us", "ru", "de(nodeadkeys)"])
def test_valid_symbols(sym):
    assert valid_layout_or_variant(sym) is True


def test_get_layout_groups():
    assert get_layout(SYMBOLS, 0) == "us"
    assert get_layout(SYMBOLS, 1) == "ru"


def test_get_layout_beyond_last_group_returns_last():
    assert get_layout(SYMBOLS, 9) == "ru"


def test_get_layout_without_layouts():
    assert get_layout("pc+inet(evdev)", 0) is None