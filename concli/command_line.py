# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Entry point that ties parsing, help and dispatch together.

`CommandLine.run()` parses an argv against a command tree and then, in order:

1. On `ParserError`: prints the error message followed by the help of the
   command that failed, and returns 1. When a help flag was among the flags
   resolved before the failure, only the help is printed and 0 is returned.
2. If a help flag was given: prints the help of the resolved command, returns 0.
3. Fires the `on_flags` callback of every command on the resolved path that owns
   one of the resolved flags, innermost command first, once per command.
4. Awaits the resolved handler (sync or async). A command without a handler
   prints its help instead.

Exceptions raised by handlers propagate unchanged.

Example:
    root = CommandLine.create_group("tool", "Example tool")
    hello = root.create_action("hello", "Say hello", [ArgumentDefinition("name", StringTypeValidator())])

    @hello.handler
    async def say_hello(result, name):
        print(f"Hello {name}")

    if __name__ == "__main__":
        CommandLine.main(root)
"""
from __future__ import annotations

import asyncio
import sys
from typing import Any, Sequence

from rich.markup import escape

from concli.command import ActionCommand, Command, GroupCommand
from concli.config import CliConfig
from concli.console import get_console
from concli.exceptions import ParserError
from concli.help import render_help
from concli.logger import logger
from concli.parser.argument import ArgumentDefinition
from concli.parser.commands_parser import CommandsParser, ParseResult
from concli.themes import OneColors
from concli.utils import ensure_async, setup_logging


class CommandLine:
    """Factory for root commands and runner for a parsed command line."""

    @staticmethod
    def create_group(name: str, description: str = "") -> GroupCommand:
        """Create a root group command."""
        return GroupCommand.create(name, description, None)

    @staticmethod
    def create_action(
        name: str,
        description: str = "",
        arguments: Sequence[ArgumentDefinition[Any]] = (),
    ) -> ActionCommand:
        """Create a root action command."""
        return ActionCommand.create(name, description, None, arguments)

    @staticmethod
    async def run(
        command: Command,
        argv: Sequence[str] | None = None,
        *,
        start_index: int = 1,
        config: CliConfig | None = None,
    ) -> int:
        """
        Parse `argv` against `command` and dispatch to the resolved handler.

        Args:
            command (Command): Root of the command tree.
            argv (Sequence[str] | None): Tokens to parse, `sys.argv` when omitted.
            start_index (int): Index of the first token to parse. Defaults to 1 to
                skip the program name.
            config (CliConfig | None): Output options, defaults to `CliConfig()`.

        Returns:
            int: 1 if parsing failed without a help request, otherwise 0.
        """
        config = config or CliConfig()
        if config.log_mode:
            setup_logging(config.log_mode)
        console = get_console(config.no_color)
        if argv is None:
            argv = sys.argv

        parser = CommandsParser(argv, start_index)
        try:
            result = parser.parse(command)
        except ParserError as error:
            logger.debug("[CommandLine] Parse failed: %s", error.message)
            if error.is_help_requested():
                render_help(error.command, console, config.help_width)
                return 0
            console.print(f"[{OneColors.DARK_RED}]-> {escape(error.message)}[/]")
            console.print()
            render_help(error.command, console, config.help_width)
            return 1

        logger.debug("[CommandLine] Resolved %r", result)
        if result.is_help_requested():
            render_help(result.command, console, config.help_width)
            return 0

        await CommandLine._fire_flag_callbacks(result)

        executable = result.get_executable()
        if executable is None:
            logger.debug(
                "[CommandLine] '%s' has no handler, showing help",
                result.command.get_full_path_name(),
            )
            render_help(result.command, console, config.help_width)
            return 0

        await ensure_async(executable)()
        return 0

    @staticmethod
    async def _fire_flag_callbacks(result: ParseResult) -> None:
        command: Command | None = result.command
        while command is not None:
            callback = command.on_flags
            if callback is not None and any(
                command.flags.has_own_flag(flag) for flag in result.flags
            ):
                logger.debug("[CommandLine] on_flags -> %s", command.name)
                await ensure_async(callback)(result)
            command = command.parent

    @staticmethod
    def main(command: Command, argv: Sequence[str] | None = None) -> None:
        """Run the command line with config from the environment and exit."""
        config = CliConfig.from_env()
        sys.exit(asyncio.run(CommandLine.run(command, argv, config=config)))
