# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandsParser`, the recursive descent parser that walks
a Concli command tree alongside an argv token list.

Parsing a `GroupCommand`:
- Leading flag tokens are resolved against the group's scope. Unknown flags are
  fatal here because a group has no positional slots to fall back to.
- The next token names a subcommand (matched case-insensitively) which is parsed
  recursively. Flags resolved at this level are copied into the inner result
  unless the inner level already set them.
- No tokens at all selects the group's own handler, if it has one.

Parsing an `ActionCommand`:
- Every remaining token is scanned. Known flags are resolved, unknown flags and
  plain tokens are collected as positionals.
- Positionals are bound to the declared arguments in order, missing ones fall
  back to their defaults and surplus tokens are appended verbatim.

Flag token grammar:
    --name          long flag, value from the next token if value based
    --name=value    long flag with inline value (split on the first "=")
    -n              short flag, value from the next token if value based
    -nVALUE         short flag with attached value
    -n=value        short flag with inline value

Every failure raises `ParserError`; there is no partial result.

Example:
    parser = CommandsParser(["copy", "--force", "a.txt"])
    result = parser.parse(root)
    result.command        # <ActionCommand copy>
    result.args           # ["a.txt", "output"]
    result.get_value(force)  # True
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Sequence

from concli.command import ActionCommand, Command, GroupCommand
from concli.exceptions import ArgumentError, ParserError
from concli.logger import logger
from concli.parser.flags import FlagScope, ValueFlag


@dataclass(frozen=True)
class FlagToken:
    """A token recognised as a flag: name (lower-cased), form and inline value."""

    name: str
    is_long: bool
    value: str | None = None


@dataclass(frozen=True)
class FlagResolution:
    """A flag token resolved against a scope."""

    flag: ValueFlag[Any]
    value: Any
    next_value_used: bool = False


class ParseResult:
    """
    The outcome of a successful parse.

    Attributes:
        command (Command): The command the argv resolved to.
        args (list[Any]): Coerced positional values in declaration order, followed
            by any surplus raw tokens.
        flags (dict[ValueFlag, Any]): Resolved flags keyed by flag identity. A value
            of None means "use the flag's default".
    """

    def __init__(
        self,
        command: Command,
        args: list[Any] | None = None,
        flags: dict[ValueFlag[Any], Any] | None = None,
    ) -> None:
        self.command = command
        self.args: list[Any] = args if args is not None else []
        self.flags: dict[ValueFlag[Any], Any] = flags if flags is not None else {}

    def get_value(self, flag: ValueFlag[Any]) -> Any:
        """Return the resolved value of a flag, or its default when unset."""
        value = self.flags.get(flag)
        if value is None:
            return flag.default_value
        return value

    def get_executable(self) -> Callable[[], Any] | None:
        """Return `action(result, *args)` bound as a zero-argument callable, if any."""
        action = self.command.action
        if action is None or not callable(action):
            return None
        return partial(action, self, *self.args)

    def is_help_requested(self) -> bool:
        """True if the help flag of the command or any of its ancestors was given."""
        command: Command | None = self.command
        while command is not None:
            if command.help_flag in self.flags:
                return True
            command = command.parent
        return False

    def __repr__(self) -> str:
        flags = ", ".join(f"{flag.name}={value!r}" for flag, value in self.flags.items())
        return (
            f"ParseResult(command='{self.command.get_full_path_name()}', "
            f"args={self.args!r}, flags={{{flags}}})"
        )


class CommandsParser:
    """
    Parses an argv token list against a command tree.

    A parser owns its cursor and is meant for a single `parse()` call. The command
    tree is only read, so one tree can back any number of parsers.

    Args:
        argv (Sequence[str]): The full token list.
        index (int): Position of the first token to parse, e.g. 1 to skip the
            program name in `sys.argv`.
    """

    def __init__(self, argv: Sequence[str], index: int = 0) -> None:
        self.argv: list[str] = list(argv)
        self.index: int = index
        self.last_error: str | None = None

    def peek(self, relative: int = 0) -> str | None:
        """Return the token at the cursor plus `relative`, or None past the end."""
        position = self.index + relative
        if 0 <= position < len(self.argv):
            return self.argv[position]
        return None

    def parse(self, command: Command) -> ParseResult:
        """
        Parse the tokens from the cursor against `command`.

        Raises:
            ParserError: On any structural, flag or positional failure.
        """
        if isinstance(command, GroupCommand):
            return self._parse_group(command)
        if isinstance(command, ActionCommand):
            return self._parse_action(command)
        raise ParserError(command, "Unsupported command type", self.argv, self.index)

    def _error(
        self, command: Command, message: str, flags: dict[ValueFlag[Any], Any]
    ) -> ParserError:
        logger.debug("[Parser] %s at index %d: %s", command.name, self.index, message)
        return ParserError(command, message, self.argv, self.index, set(flags))

    def _parse_group(self, command: GroupCommand) -> ParseResult:
        flags: dict[ValueFlag[Any], Any] = {}
        token = self.peek()
        if token is None:
            if command.action is None:
                raise self._error(
                    command,
                    f"Expected subcommand name, received none: {command.get_full_path_name()}",
                    flags,
                )
            return ParseResult(command)

        if token.startswith("-"):
            while token is not None:
                flag_token = self.parse_flag(token)
                if flag_token is None:
                    break
                resolution = self._resolve_flag(command.flags, flag_token, self.peek(1))
                if resolution is None:
                    raise self._error(
                        command,
                        self.last_error
                        or f"Failed to resolve flag with name: {flag_token.name}",
                        flags,
                    )
                self.index += 2 if resolution.next_value_used else 1
                flags[resolution.flag] = resolution.value
                token = self.peek()

            if token is None:
                return ParseResult(command, [], flags)

        name = token.lower()
        subcommand = command.get_subcommand(name)
        if subcommand is None:
            raise self._error(
                command,
                f"Unknown subcommand: {command.get_full_path_name()} >>{name}<<",
                flags,
            )

        self.index += 1
        logger.debug("[Parser] %s -> %s", command.name, subcommand.name)
        try:
            result = self.parse(subcommand)
        except ParserError as error:
            error.flags.update(flags)
            raise

        for flag, value in flags.items():
            if flag not in result.flags:
                result.flags[flag] = value
        return result

    def _parse_action(self, command: ActionCommand) -> ParseResult:
        flags: dict[ValueFlag[Any], Any] = {}
        positionals: list[str] = []

        token = self.peek()
        while token is not None:
            self.index += 1
            flag_token = self.parse_flag(token)
            if flag_token is None:
                positionals.append(token)
            else:
                resolution = self._resolve_flag(command.flags, flag_token, self.peek())
                if resolution is not None:
                    if resolution.next_value_used:
                        self.index += 1
                    flags[resolution.flag] = resolution.value
                elif self.last_error:
                    raise self._error(command, self.last_error, flags)
                else:
                    logger.debug("[Parser] Unknown flag %r kept as positional", token)
                    positionals.append(token)
            token = self.peek()

        args: list[Any] = []
        for position, argument in enumerate(command.arguments):
            raw = positionals[position] if position < len(positionals) else None
            try:
                args.append(argument.enforce(raw))
            except ArgumentError as error:
                if raw is None:
                    message = (
                        f"Missing required argument: {command.get_full_path_name()} "
                        f"... {argument}"
                    )
                else:
                    message = f"Invalid value: {raw}"
                raise self._error(command, message, flags) from error
        args.extend(positionals[len(command.arguments) :])

        return ParseResult(command, args, flags)

    def _resolve_flag(
        self, scope: FlagScope, token: FlagToken, next_token: str | None
    ) -> FlagResolution | None:
        """
        Resolve a flag token against a scope.

        Returns None on failure. `last_error` is None for a soft failure (no such
        flag in the scope chain) and holds the message for a hard failure.
        """
        self.last_error = None
        flag = scope.get_long(token.name) if token.is_long else scope.get_short(token.name)
        if flag is None:
            return None

        if not flag.is_value_based():
            if token.value is not None:
                self.last_error = (
                    f"Syntax error, this flag doesn't support values: {token.name} "
                    f"value: {token.value}"
                )
                return None
            return FlagResolution(flag, True)

        value = token.value
        next_value_used = False
        if value is None:
            value = next_token
            next_value_used = True

        if value is None:
            if flag.default_value is not None and flag.default_value is not False:
                return FlagResolution(flag, None, next_value_used)
            self.last_error = (
                "Flag with no default value, requires value to be set explicitly, "
                f"flag: {token.name}"
            )
            return None

        if not flag.validator.is_valid(value):
            self.last_error = (
                f"Incorrect type passed as value for flag: {token.name} value: {value}"
            )
            return None

        return FlagResolution(flag, flag.validator.coerce(value), next_value_used)

    @staticmethod
    def parse_flag(token: str) -> FlagToken | None:
        """
        Split a token into a `FlagToken`, or return None if it is not a flag.

        Tokens shorter than two characters or not starting with "-" are not flags.
        Names are lower-cased, values are kept as written.
        """
        if len(token) < 2 or not token.startswith("-"):
            return None

        if token[1] == "-":
            name, separator, value = token[2:].partition("=")
            return FlagToken(name.lower(), True, value if separator else None)

        name = token[1]
        if token[2:3] == "=":
            return FlagToken(name.lower(), False, token[3:])
        if len(token) > 2:
            return FlagToken(name.lower(), False, token[2:])
        return FlagToken(name.lower(), False, None)
