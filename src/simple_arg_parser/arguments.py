"""Classified argument types for simple_arg_parser."""

from enum import Enum


class ArgumentKind(Enum):
    """The four syntactic categories a token can fall into."""

    POSITIONAL = "positional"
    FLAG = "flag"
    OPTION = "option"
    VARIABLE = "variable"


class Argument:
    """
    Base class for a classified argument.

    Subclasses declare ``kind`` and the names of their payload fields in
    ``_fields``. Instances are immutable and compare equal only to the same
    case carrying the same payload.
    """

    __slots__ = ()

    kind: ArgumentKind
    _fields: tuple[str, ...] = ()

    def _set(self, **values: str) -> None:
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _values(self) -> tuple:
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self):
        return hash((type(self).__name__,) + self._values())

    def __repr__(self):
        payload = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({payload})"


class Positional(Argument):
    """A bare token, e.g. ``file.txt``."""

    __slots__ = ("value",)

    kind = ArgumentKind.POSITIONAL
    _fields = ("value",)

    def __init__(self, value: str):
        self._set(value=value)


class Flag(Argument):
    """A single-character switch taken from a cluster such as ``-fo``."""

    __slots__ = ("char",)

    kind = ArgumentKind.FLAG
    _fields = ("char",)

    def __init__(self, char: str):
        if len(char) != 1:
            raise ValueError(f"Flag must be a single character, got {char!r}")
        self._set(char=char)


class Option(Argument):
    """A long-form switch without a value, e.g. ``--quiet``."""

    __slots__ = ("name",)

    kind = ArgumentKind.OPTION
    _fields = ("name",)

    def __init__(self, name: str):
        self._set(name=name)


class Variable(Argument):
    """A long-form switch carrying a value, e.g. ``--output-type=quiet``."""

    __slots__ = ("name", "value")

    kind = ArgumentKind.VARIABLE
    _fields = ("name", "value")

    def __init__(self, name: str, value: str):
        self._set(name=name, value=value)
