# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentDefinition` dataclass used by `ActionCommand` to describe
its positional parameters.

Each definition couples a lower-cased name with a `ValueTypeValidator` and an
optional default. A definition without a default (`default_value=None`) is
required. Definitions are built once with the command tree and shared by every
parse, so they are never mutated after construction.

Key Attributes:
- `name`: Lower-cased argument name, unique within an action's argument list.
- `validator`: Type strategy used to validate and coerce raw tokens.
- `default_value`: Value used when the token is omitted, `None` if required.
- `description`: Help text.

Example:
    source = ArgumentDefinition("source", StringTypeValidator())
    dest = ArgumentDefinition("dest", StringTypeValidator(), default_value="output")

    source.enforce("a.txt")   # "a.txt"
    dest.enforce(None)        # "output"
    str(source), str(dest)    # "<source:string>", "[dest:string]"
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from concli.exceptions import InvalidArgumentValueError, MissingArgumentError
from concli.parser.value_type import ValueTypeValidator

T = TypeVar("T")


@dataclass(eq=False)
class ArgumentDefinition(Generic[T]):
    """
    Represents a named, typed positional argument.

    Attributes:
        name (str): Argument name, lower-cased on construction.
        validator (ValueTypeValidator[T]): Validates and coerces raw tokens.
        default_value (T | None): Fallback value; `None` marks the argument as required.
        description (str): Help text for the argument.
    """

    name: str
    validator: ValueTypeValidator[T]
    default_value: T | None = None
    description: str = ""

    def __post_init__(self) -> None:
        self.name = self.name.lower()

    def is_required(self) -> bool:
        """Return True if the argument has no default value."""
        return self.default_value is None

    def enforce(self, raw: str | None) -> T:
        """
        Validate and coerce a raw token for this argument.

        Args:
            raw (str | None): The token, or None when it was not supplied.

        Returns:
            T: The coerced value, or the default when `raw` is None.

        Raises:
            MissingArgumentError: If `raw` is None and the argument is required.
            InvalidArgumentValueError: If `raw` fails the validator.
        """
        if raw is None:
            if self.default_value is None:
                raise MissingArgumentError(
                    self,
                    f"Following argument is required and can't be omitted: {self.name}",
                )
            return self.default_value
        if not self.validator.is_valid(raw):
            raise InvalidArgumentValueError(
                self,
                f"Following argument has invalid value: {self.name} -> {raw}",
                raw,
            )
        return self.validator.coerce(raw)

    def get_signature_text(self) -> str:
        """Return `name:type`, the inner part of the help signature."""
        return f"{self.name}:{self.validator}"

    def __str__(self) -> str:
        signature = self.get_signature_text()
        return f"<{signature}>" if self.is_required() else f"[{signature}]"
