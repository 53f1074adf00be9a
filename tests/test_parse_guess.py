import pytest

from core.errors import ParseFailure
from core.services.guess_round import MAX_GUESS, parse_guess


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("42\n", 42),
        ("  42\n", 42),
        ("\t7 \r\n", 7),
        ("+5", 5),
        ("0", 0),
        ("007", 7),
        (str(MAX_GUESS), MAX_GUESS),
    ],
)
def test_parses_trimmed_base10(text, expected):
    assert parse_guess(text) == expected


def test_whitespace_does_not_change_value():
    assert parse_guess("  42\n") == parse_guess("42")


@pytest.mark.parametrize(
    "text",
    ["abc", "", "\n", "   ", "4 2", "-1", "1_000", "3.0", "0x10", "١٢", "++1", str(MAX_GUESS + 1)],
)
def test_rejects_non_numbers(text):
    with pytest.raises(ParseFailure) as excinfo:
        parse_guess(text)
    assert excinfo.value.message == "Please type a number!"
