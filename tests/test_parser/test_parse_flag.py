import pytest

from concli.parser.commands_parser import CommandsParser, FlagToken


@pytest.mark.parametrize(
    "token,expected",
    [
        ("--name", FlagToken("name", True, None)),
        ("--name=value", FlagToken("name", True, "value")),
        ("--name=", FlagToken("name", True, "")),
        ("--name=a=b", FlagToken("name", True, "a=b")),
        ("--NAME=Value", FlagToken("name", True, "Value")),
        ("-n", FlagToken("n", False, None)),
        ("-nValue", FlagToken("n", False, "Value")),
        ("-n=value", FlagToken("n", False, "value")),
        ("-N", FlagToken("n", False, None)),
        ("-?", FlagToken("?", False, None)),
        ("--", FlagToken("", True, None)),
    ],
)
def test_parse_flag(token, expected):
    assert CommandsParser.parse_flag(token) == expected


@pytest.mark.parametrize("token", ["", "-", "name", "n-", "5"])
def test_non_flags(token):
    assert CommandsParser.parse_flag(token) is None


def test_negative_number_is_short_flag_form():
    assert CommandsParser.parse_flag("-5") == FlagToken("5", False, None)
