# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flag definitions and the scoped lookup table that resolves them.

Contents:
- `ValueFlag`: A named flag that carries a typed value (`--name=value`).
- `Flag`: A boolean presence flag (`--verbose`), true when present.
- `FlagScope`: The flags visible to one command node, chained to the scope of
  the parent command so that flags registered on a group are visible to every
  subcommand below it.

Flags are compared and hashed by identity. The same flag object may be reachable
through several keys (its name, long form, short form, and any extra aliases) and
through several scopes, yet it is always one logical entity in a parse result.

Example:
    scope = FlagScope()
    verbose = Flag("verbose", long="verbose", short="v")
    scope.add(verbose)
    scope.add_short_alias(verbose, "V")

    child = FlagScope(scope)
    child.get_short("v") is verbose   # inherited lookup
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, TypeVar

from concli.parser.argument import ArgumentDefinition
from concli.parser.value_type import BooleanTypeValidator

T = TypeVar("T")


@dataclass(eq=False)
class ValueFlag(ArgumentDefinition[T]):
    """
    Represents a named flag that accepts a value.

    Attributes:
        long (str | None): Long form without dashes, e.g. "name" for `--name`.
        short (str | None): Short form without the dash, e.g. "n" for `-n`.
    """

    long: str | None = None
    short: str | None = None
    _value_based: bool = field(default=True, init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.long is not None:
            self.long = self.long.lower()
        if self.short is not None:
            self.short = self.short.lower()

    def is_value_based(self) -> bool:
        """Return True if this flag takes a value rather than signalling presence."""
        return self._value_based

    def __str__(self) -> str:
        forms = []
        if self.long:
            forms.append(f"--{self.long}")
        if self.short:
            forms.append(f"-{self.short}")
        return ", ".join(forms)


class Flag(ValueFlag[bool]):
    """
    Represents a boolean flag (presence indicator).

    Its default is False, so a boolean flag is never required; being present on the
    command line is what makes it True.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        long: str | None = None,
        short: str | None = None,
    ) -> None:
        super().__init__(
            name,
            BooleanTypeValidator(),
            default_value=False,
            description=description,
            long=long,
            short=short,
        )
        self._value_based = False


class FlagScope:
    """
    A collection of flags with lookup by name, long form or short form.

    Lookups that miss locally continue in the parent scope. Registering a key in a
    child scope shadows the same key of the parent for that child only; nothing is
    ever copied between scopes.

    Args:
        parent (FlagScope | None): The scope of the parent command, if any.
    """

    def __init__(self, parent: FlagScope | None = None) -> None:
        self.parent: FlagScope | None = parent
        self._flags: dict[ValueFlag[Any], None] = {}
        self._index: dict[str, ValueFlag[Any]] = {}

    def has_flag(self, flag: ValueFlag[Any]) -> bool:
        """Check if a flag is registered here or in any parent scope."""
        return self.has_own_flag(flag) or (
            self.parent is not None and self.parent.has_flag(flag)
        )

    def has_own_flag(self, flag: ValueFlag[Any]) -> bool:
        """Check if a flag is registered directly in this scope."""
        return flag in self._flags

    def add(self, *flags: ValueFlag[Any]) -> FlagScope:
        """Register flags under their name, long and short forms."""
        for flag in flags:
            self._flags[flag] = None
            self._set("flag", flag.name, flag)
            if flag.long:
                self._set("long", flag.long, flag)
            if flag.short:
                self._set("short", flag.short, flag)
        return self

    def add_short_alias(self, flag: ValueFlag[Any], short: str) -> FlagScope:
        """Register an extra short form for a flag."""
        self._flags[flag] = None
        self._set("flag", flag.name, flag)
        self._set("short", short, flag)
        return self

    def add_long_alias(self, flag: ValueFlag[Any], long: str) -> FlagScope:
        """Register an extra long form for a flag."""
        self._flags[flag] = None
        self._set("flag", flag.name, flag)
        self._set("long", long, flag)
        return self

    def _set(self, namespace: str, key: str, flag: ValueFlag[Any]) -> None:
        self._index[f"{namespace}:{key.lower()}"] = flag

    def _get(self, namespace: str, key: str) -> ValueFlag[Any] | None:
        flag = self._index.get(f"{namespace}:{key.lower()}")
        if flag is None and self.parent is not None:
            return self.parent._get(namespace, key)
        return flag

    def get_long(self, key: str) -> ValueFlag[Any] | None:
        """Retrieve a flag by its long form, searching parent scopes."""
        return self._get("long", key)

    def get_short(self, key: str) -> ValueFlag[Any] | None:
        """Retrieve a flag by its short form, searching parent scopes."""
        return self._get("short", key)

    def get_by_name(self, name: str) -> ValueFlag[Any] | None:
        """Retrieve a flag by its primary name, searching parent scopes."""
        return self._get("flag", name)

    def get_all(self) -> tuple[ValueFlag[Any], ...]:
        """Return the flags registered directly in this scope, in order."""
        return tuple(self._flags)

    def get_aliases(self, flag: ValueFlag[Any]) -> list[str]:
        """Return every local command-line form of a flag, e.g. ["--help", "-h", "-?"]."""
        forms = []
        for key, candidate in self._index.items():
            if candidate is not flag:
                continue
            namespace, _, name = key.partition(":")
            if namespace == "long":
                forms.append(f"--{name}")
            elif namespace == "short":
                forms.append(f"-{name}")
        return forms

    def __iter__(self) -> Iterator[ValueFlag[Any]]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, flag: object) -> bool:
        return flag in self._flags

    def __repr__(self) -> str:
        names = ", ".join(flag.name for flag in self._flags)
        return f"FlagScope(flags=[{names}], inherited={self.parent is not None})"
