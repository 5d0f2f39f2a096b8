from unittest.mock import AsyncMock, Mock

import pytest

from concli.command import GroupCommand
from concli.parser.argument import ArgumentDefinition
from concli.parser.commands_parser import CommandsParser, ParseResult
from concli.parser.flags import Flag, ValueFlag
from concli.parser.value_type import StringTypeValidator


@pytest.fixture
def root():
    return GroupCommand.create("tool", "Root command")


def test_get_value_falls_back_to_default(root):
    flag = ValueFlag("mode", StringTypeValidator(), default_value="fast", long="mode")
    result = ParseResult(root, [], {flag: None})
    assert result.get_value(flag) == "fast"
    assert ParseResult(root).get_value(flag) == "fast"
    assert ParseResult(root, [], {flag: "slow"}).get_value(flag) == "slow"


def test_executable_calls_action_with_result():
    root = GroupCommand.create("tool")
    run = root.create_action("run", "Run action")
    action = Mock()
    run.action = action

    result = CommandsParser(["run", "--help"]).parse(root)
    executable = result.get_executable()
    assert callable(executable)
    executable()
    action.assert_called_once_with(result)


def test_executable_passes_positionals(root):
    echo = root.create_action(
        "echo", "Echo command", [ArgumentDefinition("value", StringTypeValidator())]
    )
    action = Mock(return_value="done")
    echo.action = action

    result = CommandsParser(["echo", "hello", "extra"]).parse(root)
    assert result.get_executable()() == "done"
    action.assert_called_once_with(result, "hello", "extra")


def test_no_executable_without_action(root):
    root.create_group("config", "Config group")
    result = CommandsParser(["config", "--help"]).parse(root)
    assert result.command.name == "config"
    assert result.get_executable() is None


def test_group_handler_executable(root):
    action = Mock()
    root.action = action
    result = CommandsParser([]).parse(root)
    result.get_executable()()
    action.assert_called_once_with(result)


@pytest.mark.asyncio
async def test_async_executable(root):
    run = root.create_action("run", "Run action")
    action = AsyncMock(return_value=7)
    run.action = action

    result = CommandsParser(["run"]).parse(root)
    assert await result.get_executable()() == 7
    action.assert_awaited_once_with(result)


def test_help_requested_through_ancestor(root):
    verbose = Flag("verbose", long="verbose")
    root.flags.add(verbose)
    root.create_action("run", "Run action")

    result = CommandsParser(["--help", "run"]).parse(root)
    assert result.command.name == "run"
    assert root.help_flag in result.flags
    assert result.is_help_requested()

    result = CommandsParser(["--verbose", "run"]).parse(root)
    assert not result.is_help_requested()
    assert result.get_value(verbose) is True


def test_repr(root):
    run = root.create_action("run")
    result = ParseResult(run, ["a"], {run.help_flag: True})
    assert repr(result) == "ParseResult(command='tool run', args=['a'], flags={help=True})"
