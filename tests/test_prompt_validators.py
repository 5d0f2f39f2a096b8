import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from concli.parser.argument import ArgumentDefinition
from concli.parser.value_type import (
    IntegerTypeValidator,
    StringEnumTypeValidator,
    StringTypeValidator,
)
from concli.validators import argument_validator, value_type_validator


def test_value_type_validator_accepts_valid_input():
    validator = value_type_validator(IntegerTypeValidator())
    for valid in ["1", "-5", "42"]:
        validator.validate(Document(valid))  # should not raise


@pytest.mark.parametrize("invalid", ["", "abc", "1.5"])
def test_value_type_validator_rejects_invalid_input(invalid):
    validator = value_type_validator(IntegerTypeValidator())
    with pytest.raises(ValidationError):
        validator.validate(Document(invalid))


def test_value_type_validator_messages():
    validator = value_type_validator(StringEnumTypeValidator(["red", "green"]))
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(Document("blue"))
    assert "red|green" in exc_info.value.message

    custom = value_type_validator(IntegerTypeValidator(), error_message="Numbers only")
    with pytest.raises(ValidationError) as exc_info:
        custom.validate(Document("x"))
    assert exc_info.value.message == "Numbers only"


def test_argument_validator_required():
    validator = argument_validator(ArgumentDefinition("count", IntegerTypeValidator()))
    validator.validate(Document("3"))
    with pytest.raises(ValidationError):
        validator.validate(Document(""))
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(Document("three"))
    assert "<count:int>" in exc_info.value.message


def test_argument_validator_optional_accepts_empty():
    validator = argument_validator(
        ArgumentDefinition("dest", StringTypeValidator(), default_value="output")
    )
    validator.validate(Document(""))
    validator.validate(Document("target"))


@pytest.mark.asyncio
async def test_argument_validator_async():
    validator = argument_validator(
        ArgumentDefinition("count", IntegerTypeValidator(), default_value=1)
    )
    await validator.validate_async(Document(""))
    with pytest.raises(ValidationError):
        await validator.validate_async(Document("many"))
