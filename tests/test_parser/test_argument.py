import pytest

from concli.exceptions import (
    ArgumentError,
    InvalidArgumentValueError,
    MissingArgumentError,
)
from concli.parser.argument import ArgumentDefinition
from concli.parser.value_type import IntegerTypeValidator, StringTypeValidator


def test_name_is_lower_cased():
    argument = ArgumentDefinition("Source", StringTypeValidator())
    assert argument.name == "source"


def test_required_without_default():
    assert ArgumentDefinition("source", StringTypeValidator()).is_required()
    assert not ArgumentDefinition(
        "dest", StringTypeValidator(), default_value="output"
    ).is_required()


def test_enforce_returns_coerced_value():
    argument = ArgumentDefinition("count", IntegerTypeValidator())
    assert argument.enforce("42") == 42


def test_enforce_missing_uses_default():
    argument = ArgumentDefinition("count", IntegerTypeValidator(), default_value=3)
    assert argument.enforce(None) == 3


def test_enforce_missing_required_raises():
    argument = ArgumentDefinition("source", StringTypeValidator())
    with pytest.raises(MissingArgumentError) as exc_info:
        argument.enforce(None)
    assert exc_info.value.argument is argument
    assert "source" in str(exc_info.value)


def test_enforce_invalid_value_raises():
    argument = ArgumentDefinition("count", IntegerTypeValidator(), default_value=1)
    with pytest.raises(InvalidArgumentValueError) as exc_info:
        argument.enforce("many")
    assert isinstance(exc_info.value, ArgumentError)
    assert exc_info.value.value == "many"
    assert "count" in str(exc_info.value)
    assert "many" in str(exc_info.value)


def test_string_forms():
    required = ArgumentDefinition("source", StringTypeValidator())
    optional = ArgumentDefinition("count", IntegerTypeValidator(), default_value=1)
    assert str(required) == "<source:string>"
    assert str(optional) == "[count:int]"
    assert optional.get_signature_text() == "count:int"
