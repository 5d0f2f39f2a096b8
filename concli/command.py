# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the command tree for Concli CLI.

A command line is a tree of nodes built once, top-down, before any parsing:

- GroupCommand: a branching node that dispatches to named subcommands and may
  carry its own handler for when no subcommand is given.
- ActionCommand: a leaf node with an ordered list of positional arguments and a
  handler that receives the parse result plus the coerced arguments.

Every node owns a `FlagScope` chained to its parent's scope, so flags added to a
group are visible to all of its descendants, and every node registers its own
`help` flag (`--help`, `-h`, `-?`). Parsing only ever reads the tree, which makes
a built tree safe to reuse for any number of parses.

Example:
    root = GroupCommand.create("tool", "Example tool")
    copy = root.create_action(
        "copy",
        "Copy a file",
        [
            ArgumentDefinition("source", StringTypeValidator()),
            ArgumentDefinition("dest", StringTypeValidator(), default_value="output"),
        ],
    )

    @copy.handler
    def do_copy(result, source, dest):
        ...
"""
from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Iterator, Sequence

from concli.exceptions import CommandDefinitionError
from concli.help import (
    PREFERRED_WIDTH,
    build_arguments,
    build_help,
    build_subcommands,
)
from concli.parser.argument import ArgumentDefinition
from concli.parser.flags import Flag, FlagScope
from concli.utils import CaseInsensitiveDict

if TYPE_CHECKING:
    from concli.parser.commands_parser import ParseResult

FlagsCallback = Callable[["ParseResult"], Any]


class Command(ABC):
    """
    Base class for every node of the command tree.

    Attributes:
        name (str): Lower-cased command name.
        description (str): One line description used in help output.
        flags (FlagScope): Flags visible to this command, inheriting the parent's.
        help_flag (Flag): The implicit help flag registered on this node.
        on_flags (Callable | None): Optional callback fired by `CommandLine.run()`
            when a flag registered on this node was resolved.
    """

    def __init__(
        self, name: str, description: str = "", parent: Command | None = None
    ) -> None:
        if not name:
            raise CommandDefinitionError("Command name cannot be empty")
        self.name: str = name.lower()
        self.description: str = description or ""
        self._parent: weakref.ref[Command] | None = (
            weakref.ref(parent) if parent is not None else None
        )
        self.flags: FlagScope = FlagScope(parent.flags if parent is not None else None)
        self.help_flag: Flag = Flag(
            "help", description="Show this help message.", long="help", short="h"
        )
        self.flags.add(self.help_flag)
        self.flags.add_short_alias(self.help_flag, "?")
        self.on_flags: FlagsCallback | None = None
        self._action: Callable[..., Any] | None = None

    @property
    def parent(self) -> Command | None:
        """The parent command, or None for a root command."""
        if self._parent is None:
            return None
        return self._parent()

    def get_full_path_name(self) -> str:
        """Return the space separated path from the root, e.g. "tool config set"."""
        parent = self.parent
        if parent is None:
            return self.name
        return f"{parent.get_full_path_name()} {self.name}"

    def get_help(self, width: int = PREFERRED_WIDTH) -> Iterator[str]:
        """Yield the help lines for this command. Every call returns a new iterator."""
        yield from build_help(self, width)

    def _validate_handler(self, action: Callable[..., Any] | None) -> None:
        if action is not None and not callable(action):
            raise CommandDefinitionError(
                f"[Command:{self.name}] Handler must be callable, got {type(action).__name__}"
            )

    @property
    def action(self) -> Callable[..., Any] | None:
        """The handler invoked for this command, if any."""
        return self._action

    @action.setter
    def action(self, action: Callable[..., Any] | None) -> None:
        self._validate_handler(action)
        self._action = action

    @abstractmethod
    def syntax(self) -> str:
        """Return the one line usage syntax of this command."""

    def handler(self, function: Callable[..., Any]) -> Callable[..., Any]:
        """Decorator form of setting `action`."""
        self.action = function
        return function

    def __str__(self) -> str:
        return f"{type(self).__name__}(name='{self.name}', description='{self.description}')"

    def __repr__(self) -> str:
        return str(self)


class ActionCommand(Command):
    """
    A leaf command with positional arguments and a handler.

    The handler is called as `action(result, *args)` where `args` are the coerced
    positional values in declaration order, followed by any surplus raw tokens.

    Attributes:
        arguments (tuple[ArgumentDefinition, ...]): Positional parameters in order.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        parent: Command | None = None,
        arguments: Sequence[ArgumentDefinition[Any]] = (),
    ) -> None:
        super().__init__(name, description, parent)
        self.arguments: tuple[ArgumentDefinition[Any], ...] = tuple(arguments)
        seen: set[str] = set()
        for argument in self.arguments:
            if argument.name in seen:
                raise CommandDefinitionError(
                    f"[Command:{self.name}] Duplicate argument name '{argument.name}'"
                )
            seen.add(argument.name)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        parent: Command | None,
        arguments: Sequence[ArgumentDefinition[Any]] = (),
    ) -> ActionCommand:
        return cls(name, description, parent, arguments)

    def syntax(self) -> str:
        signature = " ".join(str(argument) for argument in self.arguments)
        if signature:
            return f"{self.get_full_path_name()} {signature}"
        return self.get_full_path_name()

    def get_help(self, width: int = PREFERRED_WIDTH) -> Iterator[str]:
        yield from super().get_help(width)
        yield from build_arguments(self, width)


class GroupCommand(Command):
    """
    A branching command holding named subcommands.

    Subcommands keep insertion order and are matched case-insensitively. A group
    may have its own handler, called as `action(result)` when no subcommand name
    follows the group on the command line.

    Attributes:
        subcommands (CaseInsensitiveDict[str, Command]): Subcommands by name.
    """

    def __init__(
        self, name: str, description: str = "", parent: Command | None = None
    ) -> None:
        super().__init__(name, description, parent)
        self.subcommands: CaseInsensitiveDict = CaseInsensitiveDict()

    @classmethod
    def create(
        cls, name: str, description: str = "", parent: Command | None = None
    ) -> GroupCommand:
        return cls(name, description, parent)

    def _register(self, command: Command) -> None:
        if command.name in self.subcommands:
            raise CommandDefinitionError(
                f"[Command:{self.name}] Subcommand '{command.name}' already exists"
            )
        self.subcommands[command.name] = command

    def create_group(self, name: str, description: str = "") -> GroupCommand:
        """Create and register a nested group."""
        command = GroupCommand.create(name, description, self)
        self._register(command)
        return command

    def create_action(
        self,
        name: str,
        description: str = "",
        arguments: Sequence[ArgumentDefinition[Any]] = (),
    ) -> ActionCommand:
        """Create and register an action with the given positional arguments."""
        command = ActionCommand.create(name, description, self, arguments)
        self._register(command)
        return command

    def get_subcommand(self, name: str) -> Command | None:
        return self.subcommands.get(name)

    def syntax(self) -> str:
        names = "|".join(command.name for command in self.subcommands.values())
        return f"{self.get_full_path_name()} <{names}>"

    def get_help(self, width: int = PREFERRED_WIDTH) -> Iterator[str]:
        yield from super().get_help(width)
        yield from build_subcommands(self, width)
