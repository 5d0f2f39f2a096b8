# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Concli CLI framework.

These exceptions provide structured error handling for the two phases of a
command line's life: building the command tree (definition errors) and
parsing an argv against it (argument and parser errors).

All exceptions inherit from `ConcliError`, the base exception for the framework.

Exception Hierarchy:
- ConcliError
    ├── CommandDefinitionError
    ├── ArgumentError
    │   ├── MissingArgumentError
    │   └── InvalidArgumentValueError
    └── ParserError

`ParserError` is the only exception raised by `CommandsParser.parse()`. It carries
the command that was active when parsing failed, the full argv, the cursor
position and every flag resolved before the failure so callers can still decide
whether the user was really asking for help.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from concli.command import Command
    from concli.parser.argument import ArgumentDefinition
    from concli.parser.flags import ValueFlag


class ConcliError(Exception):
    """Base exception for the Concli framework."""


class CommandDefinitionError(ConcliError):
    """Exception raised when a command tree, argument or type is built incorrectly."""


class ArgumentError(ConcliError):
    """Exception raised when a value cannot be enforced for an argument definition."""

    def __init__(self, argument: ArgumentDefinition[Any], message: str) -> None:
        super().__init__(message)
        self.argument = argument


class MissingArgumentError(ArgumentError):
    """Exception raised when a required argument has no value."""


class InvalidArgumentValueError(ArgumentError):
    """Exception raised when a value fails the argument's type validator."""

    def __init__(
        self, argument: ArgumentDefinition[Any], message: str, value: str
    ) -> None:
        super().__init__(argument, message)
        self.value = value


class ParserError(ConcliError):
    """
    Exception raised when an argv cannot be parsed against a command tree.

    Attributes:
        command (Command): The command node being parsed when the failure occurred.
        message (str): Human readable description of the failure.
        argv (list[str]): The full token list handed to the parser.
        index (int): Cursor position at the time of failure.
        flags (set[ValueFlag]): Flags resolved before the failure, merged across
            every group level on the way down.
    """

    def __init__(
        self,
        command: Command,
        message: str,
        argv: Sequence[str],
        index: int,
        flags: set[ValueFlag[Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.message = message
        self.argv = list(argv)
        self.index = index
        self.flags: set[ValueFlag[Any]] = set(flags) if flags else set()

    def is_help_requested(self) -> bool:
        """True if a help flag of the failing command or its ancestors was resolved."""
        command: Command | None = self.command
        while command is not None:
            if command.help_flag in self.flags:
                return True
            command = command.parent
        return False

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"ParserError(command='{self.command.name}', message={self.message!r}, "
            f"index={self.index})"
        )
