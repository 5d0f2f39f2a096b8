# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help text generation for Concli commands.

Help is produced as a lazy sequence of Rich markup lines rather than printed
directly, so callers can join, filter or render it however they like. Every
builder is a generator function: each call returns a fresh, independent
iterator and no cursor state is shared between calls.

Layout for a command:

     Usage of tool config set <key:string> [value:string]

      ---------------------------------------------------------------
       Wrapped description of the command.
      ---------------------------------------------------------------

    Flags:
      --help, -h, -?       Show this help message.
    Inherited Flags:
      --verbose, -v        Enable verbose output.
      Arguments:
        <key:string>       Configuration key.

Groups list their subcommands instead of arguments.
"""
from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING, Any, Iterator

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from concli.command import ActionCommand, Command, GroupCommand
    from concli.parser.flags import ValueFlag

PREFERRED_WIDTH = 75
LABEL_WIDTH = 20


def _row(label: str, description: str, indent: int, style: str) -> str:
    padded = escape(label.ljust(LABEL_WIDTH))
    return f"{' ' * indent}[{style}]{padded}[/] [dim]{escape(description)}[/dim]"


def _flag_label(flag: ValueFlag[Any], forms: list[str]) -> str:
    label = ", ".join(forms) or str(flag)
    if flag.is_value_based():
        return f"{label} <{flag.validator}>"
    return label


def build_help(command: Command, width: int = PREFERRED_WIDTH) -> Iterator[str]:
    """Yield the usage header, description block and flags of a command."""
    yield f"[concli.usage] Usage of {escape(command.syntax())}[/]"
    yield ""
    yield f"[dim]  {'-' * width}[/dim]"
    for line in textwrap.wrap(command.description, width):
        yield f"   {escape(line)}"
    yield f"[dim]  {'-' * width}[/dim]"
    yield ""
    yield from build_flags(command)
    yield ""


def build_flags(command: Command) -> Iterator[str]:
    """Yield the flags registered on the command, then those inherited from parents."""
    yield "[concli.heading]Flags:[/]"
    for flag in command.flags.get_all():
        label = _flag_label(flag, command.flags.get_aliases(flag))
        yield _row(label, flag.description, 2, "concli.flag")

    inherited = []
    seen = set(command.flags.get_all())
    scope = command.flags.parent
    while scope is not None:
        for flag in scope.get_all():
            if flag in seen or command.flags.get_by_name(flag.name) is not flag:
                continue
            seen.add(flag)
            label = _flag_label(flag, scope.get_aliases(flag))
            inherited.append(_row(label, flag.description, 2, "concli.flag"))
        scope = scope.parent

    if inherited:
        yield "[concli.heading]Inherited Flags:[/]"
        yield from inherited


def build_arguments(command: ActionCommand, width: int = PREFERRED_WIDTH) -> Iterator[str]:
    """Yield the positional arguments of an action, if it declares any."""
    if not command.arguments:
        return
    yield "[concli.heading]  Arguments:[/]"
    for argument in command.arguments:
        yield _row(str(argument), argument.description, 4, "concli.argument")
    yield ""


def build_subcommands(command: GroupCommand, width: int = PREFERRED_WIDTH) -> Iterator[str]:
    """Yield the subcommands of a group with descriptions truncated to fit `width`."""
    yield "[concli.heading]  SubCommands:[/]"
    limit = max(width - 25, 10)
    for subcommand in command.subcommands.values():
        description = subcommand.description
        if len(description) > limit:
            description = f"{description[:limit]}..."
        yield _row(subcommand.name, description, 4, "concli.argument")
    yield ""


def render_help(
    command: Command, console: Console | None = None, width: int = PREFERRED_WIDTH
) -> None:
    """Print the help lines of a command to a Rich console."""
    if console is None:
        from concli.console import console as default_console

        console = default_console
    for line in command.get_help(width):
        console.print(line)
