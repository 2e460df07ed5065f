import pytest

from asciireel.validation import is_valid_integer, is_valid_timestamp


@pytest.mark.parametrize("text", ["0", "10", "60", "900", "0007"])
def test_valid_integers(text):
    assert is_valid_integer(text) is True


@pytest.mark.parametrize("text", ["", None, "-5", "+5", "1.5", "12a", " 1", "٣"])
def test_invalid_integers(text):
    assert is_valid_integer(text) is False


@pytest.mark.parametrize("text", ["00:00:00", "00:01:30", "23:59:59", "12:00:01"])
def test_valid_timestamps(text):
    assert is_valid_timestamp(text) is True


@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "24:00:00",
        "00:60:00",
        "00:00:60",
        "0:00:00",
        "00:00:000",
        "00-00-00",
        "aa:00:00",
        "00:0b:00",
        "00:00:-1",
    ],
)
def test_invalid_timestamps(text):
    assert is_valid_timestamp(text) is False