# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prompt Toolkit validators built from Concli value types.

The same `ValueTypeValidator` strategies that check command-line tokens can
check interactive input, so a value asked for with `PromptSession.prompt_async()`
obeys exactly the rules it would on the command line.

Included Validators:
- value_type_validator: Accepts any text the value type considers valid.
- argument_validator: Like `value_type_validator` for an argument definition,
  also accepting an empty answer when the argument has a default.
"""
from typing import Any

from prompt_toolkit.validation import Validator

from concli.parser.argument import ArgumentDefinition
from concli.parser.value_type import ValueTypeValidator


def value_type_validator(
    validator: ValueTypeValidator[Any], error_message: str | None = None
) -> Validator:
    """Validator for a value type."""

    def validate(text: str) -> bool:
        return validator.is_valid(text)

    if error_message is None:
        error_message = f"Invalid input. Expected {validator}: {validator.description}."

    return Validator.from_callable(validate, error_message=error_message)


def argument_validator(argument: ArgumentDefinition[Any]) -> Validator:
    """Validator for an argument, allowing empty input when a default exists."""

    def validate(text: str) -> bool:
        if not text:
            return not argument.is_required()
        return argument.validator.is_valid(text)

    if argument.is_required():
        error_message = f"Invalid input for {argument}. Expected {argument.validator}."
    else:
        error_message = (
            f"Invalid input for {argument}. Expected {argument.validator}, "
            f"or leave empty for '{argument.default_value}'."
        )

    return Validator.from_callable(validate, error_message=error_message)
