"""
Concli CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import ActionCommand, Command, GroupCommand
from .command_line import CommandLine
from .config import CliConfig
from .exceptions import (
    ArgumentError,
    CommandDefinitionError,
    ConcliError,
    InvalidArgumentValueError,
    MissingArgumentError,
    ParserError,
)
from .parser import (
    ArgumentDefinition,
    BooleanTypeValidator,
    Flag,
    FlagScope,
    GlobPatternTypeValidator,
    IntegerTypeValidator,
    NumberTypeValidator,
    StringEnumTypeValidator,
    StringTypeValidator,
    ValueFlag,
    ValueTypeValidator,
)
from .parser.commands_parser import CommandsParser, ParseResult
from .version import __version__

logger = logging.getLogger("concli")


__all__ = [
    "ActionCommand",
    "ArgumentDefinition",
    "ArgumentError",
    "BooleanTypeValidator",
    "CliConfig",
    "Command",
    "CommandDefinitionError",
    "CommandLine",
    "CommandsParser",
    "ConcliError",
    "Flag",
    "FlagScope",
    "GlobPatternTypeValidator",
    "GroupCommand",
    "IntegerTypeValidator",
    "InvalidArgumentValueError",
    "MissingArgumentError",
    "NumberTypeValidator",
    "ParseResult",
    "ParserError",
    "StringEnumTypeValidator",
    "StringTypeValidator",
    "ValueFlag",
    "ValueTypeValidator",
    "__version__",
]
