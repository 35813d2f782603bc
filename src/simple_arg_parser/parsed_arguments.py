"""Parsed result container for simple_arg_parser."""

from types import MappingProxyType
from typing import Iterable, Optional

from .arguments import Argument
from .types import VariableMap


class ParsedArguments:
    """
    Read-only result of classifying a token sequence.

    * `arguments` – every classified entry in encounter order, one per flag
      character for flag clusters.
    * `positionals`, `flags`, `options` – grouped views in encounter order,
      duplicates kept.
    * `variables` – name to value; the last occurrence of a name wins.
    """

    __slots__ = ("_arguments", "_positionals", "_flags", "_options", "_variables")

    def __init__(
        self,
        arguments: Iterable[Argument] = (),
        positionals: Iterable[str] = (),
        flags: Iterable[str] = (),
        options: Iterable[str] = (),
        variables: Optional[VariableMap] = None,
    ):
        self._arguments = tuple(arguments)
        self._positionals = tuple(positionals)
        self._flags = tuple(flags)
        self._options = tuple(options)
        self._variables = MappingProxyType(dict(variables or {}))

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return self._arguments

    @property
    def positionals(self) -> tuple[str, ...]:
        return self._positionals

    @property
    def flags(self) -> tuple[str, ...]:
        return self._flags

    @property
    def options(self) -> tuple[str, ...]:
        return self._options

    @property
    def variables(self) -> MappingProxyType:
        return self._variables

    def has_flag(self, char: str) -> bool:
        """Check whether a flag character was given at least once."""
        return char in self._flags

    def has_option(self, name: str) -> bool:
        """Check whether an option was given at least once."""
        return name in self._options

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Allow .get() access to variables."""
        return self._variables.get(name, default)

    def __contains__(self, name):
        """Allow checking if a variable was set using 'in' operator."""
        return name in self._variables

    def __iter__(self):
        return iter(self._arguments)

    def __len__(self):
        return len(self._arguments)

    def __eq__(self, other):
        if not isinstance(other, ParsedArguments):
            return NotImplemented
        return (
            self._arguments == other._arguments
            and self._positionals == other._positionals
            and self._flags == other._flags
            and self._options == other._options
            and dict(self._variables) == dict(other._variables)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"ParsedArguments(positionals={list(self._positionals)!r}, "
            f"flags={list(self._flags)!r}, options={list(self._options)!r}, "
            f"variables={dict(self._variables)!r})"
        )
