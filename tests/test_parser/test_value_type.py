import re

import pytest

from concli.exceptions import CommandDefinitionError
from concli.parser.value_type import (
    BooleanTypeValidator,
    GlobPatternTypeValidator,
    IntegerTypeValidator,
    NumberTypeValidator,
    StringEnumTypeValidator,
    StringTypeValidator,
)


@pytest.mark.parametrize("raw", ["true", "false", "1", "0", "TRUE", "False"])
def test_boolean_accepts_known_words(raw):
    assert BooleanTypeValidator().is_valid(raw)


@pytest.mark.parametrize("raw", ["yes", "no", "", "2", "truthy"])
def test_boolean_rejects_other_words(raw):
    assert not BooleanTypeValidator().is_valid(raw)


def test_boolean_coerce():
    validator = BooleanTypeValidator()
    assert validator.coerce("true") is True
    assert validator.coerce("1") is True
    assert validator.coerce("false") is False
    assert validator.coerce("FALSE") is False
    assert validator.coerce("0") is False


def test_number_validation_and_coercion():
    validator = NumberTypeValidator()
    assert validator.is_valid("123")
    assert validator.is_valid("123.45")
    assert validator.is_valid("-0.5")
    assert not validator.is_valid("abc")
    assert not validator.is_valid("inf")
    assert not validator.is_valid("nan")
    assert validator.coerce("123") == 123
    assert validator.coerce("123.45") == 123.45


def test_integer_validation():
    validator = IntegerTypeValidator()
    assert validator.is_valid("123")
    assert validator.is_valid("-7")
    assert validator.is_valid("5.0")
    assert not validator.is_valid("123.45")
    assert not validator.is_valid("abc")
    assert not validator.is_valid("inf")


def test_integer_coerce():
    validator = IntegerTypeValidator()
    assert validator.coerce("123") == 123
    assert isinstance(validator.coerce("123"), int)
    assert validator.coerce("5.0") == 5
    assert validator.coerce("1e3") == 1000


def test_string_accepts_anything():
    validator = StringTypeValidator()
    assert validator.is_valid("hello")
    assert validator.is_valid("")
    assert validator.coerce("hello") == "hello"


def test_enum_validation_is_case_insensitive():
    validator = StringEnumTypeValidator(["red", "green", "blue"])
    assert validator.is_valid("red")
    assert validator.is_valid("GREEN")
    assert not validator.is_valid("yellow")


def test_enum_coerce_falls_back_to_first_value():
    validator = StringEnumTypeValidator(["red", "green", "blue"])
    assert validator.coerce("red") == "red"
    assert validator.coerce("yellow") == "red"


def test_enum_requires_values():
    with pytest.raises(CommandDefinitionError):
        StringEnumTypeValidator([])


def test_enum_display():
    validator = StringEnumTypeValidator(["Red", "green"])
    assert str(validator) == "red|green"
    assert "Red, green" in validator.description

    described = StringEnumTypeValidator(["a"], description="Pick one")
    assert described.description == "Pick one"


def test_glob_translation():
    validator = GlobPatternTypeValidator()
    assert validator.is_valid("*.txt")
    assert validator.is_valid("file?.js")
    assert validator.coerce("*.txt").pattern == r"^.*\.txt$"
    assert validator.coerce("file?.js").pattern == r"^file.\.js$"


def test_glob_matching():
    pattern = GlobPatternTypeValidator().coerce("report-??.csv")
    assert isinstance(pattern, re.Pattern)
    assert pattern.match("report-01.csv")
    assert not pattern.match("report-1.csv")
    assert not pattern.match("report-01.csvx")


def test_glob_escapes_regex_characters():
    pattern = GlobPatternTypeValidator.glob_to_regex("a+b(c)")
    assert pattern.match("a+b(c)")
    assert not pattern.match("aab(c)")


def test_names():
    assert str(BooleanTypeValidator()) == "bool"
    assert str(NumberTypeValidator()) == "number"
    assert str(IntegerTypeValidator()) == "int"
    assert str(StringTypeValidator()) == "string"
    assert str(GlobPatternTypeValidator()) == "glob"
    assert StringEnumTypeValidator(["a"]).name == "enum"


@pytest.mark.parametrize("raw", ["1_000", " 12", "12 ", "١٢", "0x10", "1e", ".", "+"])
def test_numbers_accept_plain_ascii_decimals_only(raw):
    assert not NumberTypeValidator().is_valid(raw)
    assert not IntegerTypeValidator().is_valid(raw)


@pytest.mark.parametrize("raw", ["+3", ".5", "5.", "-1.5E2"])
def test_number_accepts_decimal_notations(raw):
    assert NumberTypeValidator().is_valid(raw)


def test_integer_keeps_precision_of_large_values():
    validator = IntegerTypeValidator()
    assert validator.is_valid("123456789012345678901.0")
    assert validator.coerce("123456789012345678901.0") == 123456789012345678901
    assert validator.coerce("123456789012345678901") == 123456789012345678901
    assert validator.coerce("-2.5e1") == -25
    assert not validator.is_valid("123456789012345678901.5")
