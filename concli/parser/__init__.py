"""
Concli CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentDefinition
from .flags import Flag, FlagScope, ValueFlag
from .value_type import (
    BooleanTypeValidator,
    GlobPatternTypeValidator,
    IntegerTypeValidator,
    NumberTypeValidator,
    StringEnumTypeValidator,
    StringTypeValidator,
    ValueTypeValidator,
)

__all__ = [
    "ArgumentDefinition",
    "BooleanTypeValidator",
    "Flag",
    "FlagScope",
    "GlobPatternTypeValidator",
    "IntegerTypeValidator",
    "NumberTypeValidator",
    "StringEnumTypeValidator",
    "StringTypeValidator",
    "ValueFlag",
    "ValueTypeValidator",
]
