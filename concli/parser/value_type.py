# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value type validators used by Concli arguments and flags.

A `ValueTypeValidator` is a small stateless strategy object that answers two
questions about a raw command-line token:

- `is_valid(raw)`: can this token be turned into a value of my type?
- `coerce(raw)`: turn an already validated token into the typed value.

`coerce()` never validates on its own. Callers (`ArgumentDefinition.enforce()`
and the flag resolver in `CommandsParser`) always check `is_valid()` first.
Because validators hold no per-parse state, the same instance can back any
number of flags and positional arguments.

Built-in validators:
- BooleanTypeValidator ("bool"): true/false/1/0, case-insensitive.
- NumberTypeValidator ("number"): finite floating point numbers.
- IntegerTypeValidator ("int"): numbers with no fractional part.
- StringTypeValidator ("string"): any token, returned unchanged.
- StringEnumTypeValidator ("enum"): one of a fixed, case-insensitive set of words.
- GlobPatternTypeValidator ("glob"): shell-style pattern compiled to an anchored regex.
"""
from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Generic, Iterable, TypeVar

from concli.exceptions import CommandDefinitionError

T = TypeVar("T")

VALID_BOOLEAN_VALUES = frozenset({"true", "false", "0", "1"})
FALSE_BOOLEAN_VALUES = frozenset({"false", "0"})

# Plain ASCII decimal notation with an optional exponent, e.g. "-1.5e3".
DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


class ValueTypeValidator(ABC, Generic[T]):
    """
    Base class for all value type validators.

    Subclasses set `name` (a stable type tag shown in help, e.g. "int") and
    `description`, and implement `is_valid()` and `coerce()`.
    """

    name: str = ""
    description: str = ""

    @abstractmethod
    def is_valid(self, raw: str) -> bool:
        """Return True if `raw` can be coerced to this type."""

    @abstractmethod
    def coerce(self, raw: str) -> T:
        """Convert a token that already passed `is_valid()`."""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BooleanTypeValidator(ValueTypeValidator[bool]):
    name = "bool"
    description = "Boolean type (true/false)"

    def is_valid(self, raw: str) -> bool:
        return raw.lower() in VALID_BOOLEAN_VALUES

    def coerce(self, raw: str) -> bool:
        return raw.lower() not in FALSE_BOOLEAN_VALUES


class NumberTypeValidator(ValueTypeValidator[float]):
    name = "number"
    description = "Floating point number type"

    def is_valid(self, raw: str) -> bool:
        if DECIMAL_PATTERN.fullmatch(raw) is None:
            return False
        return math.isfinite(float(raw))

    def coerce(self, raw: str) -> float:
        return float(raw)


class IntegerTypeValidator(ValueTypeValidator[int]):
    name = "int"
    description = "Integer number type"

    def is_valid(self, raw: str) -> bool:
        if DECIMAL_PATTERN.fullmatch(raw) is None:
            return False
        number = Decimal(raw)
        return number == number.to_integral_value()

    def coerce(self, raw: str) -> int:
        # Integral values written with a fraction or exponent, e.g. "5.0" or "1e3".
        return int(Decimal(raw))


class StringTypeValidator(ValueTypeValidator[str]):
    name = "string"
    description = "Raw string type"

    def is_valid(self, raw: str) -> bool:
        return isinstance(raw, str)

    def coerce(self, raw: str) -> str:
        return raw


class StringEnumTypeValidator(ValueTypeValidator[str]):
    """
    Accepts one of a fixed set of words, compared case-insensitively.

    `coerce()` maps a token outside the allowed set to the first allowed value.

    Args:
        values (Iterable[str]): Allowed values, at least one.
        description (str | None): Optional description for help output.

    Raises:
        CommandDefinitionError: If no values are given.
    """

    name = "enum"

    def __init__(self, values: Iterable[str], description: str | None = None) -> None:
        values = list(values)
        if not values:
            raise CommandDefinitionError("Enums need at least one possible value")
        self.allowed_values: tuple[str, ...] = tuple(
            dict.fromkeys(value.lower() for value in values)
        )
        self.description = (
            description or f"String enum with allowed values: {', '.join(values)}"
        )

    def is_valid(self, raw: str) -> bool:
        return raw.lower() in self.allowed_values

    def coerce(self, raw: str) -> str:
        if not self.is_valid(raw):
            return self.allowed_values[0]
        return raw

    def __str__(self) -> str:
        return "|".join(self.allowed_values)

    def __repr__(self) -> str:
        return f"StringEnumTypeValidator({list(self.allowed_values)!r})"


class GlobPatternTypeValidator(ValueTypeValidator[re.Pattern[str]]):
    name = "glob"
    description = 'Glob pattern type (e.g. "*.txt", "file?.js")'

    def is_valid(self, raw: str) -> bool:
        try:
            self.glob_to_regex(raw)
        except re.error:
            return False
        return True

    def coerce(self, raw: str) -> re.Pattern[str]:
        return self.glob_to_regex(raw)

    @staticmethod
    def glob_to_regex(glob: str) -> re.Pattern[str]:
        """
        Translate a glob into an anchored regular expression.

        `*` matches any run of characters, `?` exactly one character, and every
        other character is matched literally.

        Example:
            glob_to_regex("*.txt").pattern == r"^.*\\.txt$"
        """
        parts = []
        for char in glob:
            if char == "*":
                parts.append(".*")
            elif char == "?":
                parts.append(".")
            else:
                parts.append(re.escape(char))
        return re.compile(f"^{''.join(parts)}$")
