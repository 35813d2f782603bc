"""Tests for the classified argument types in simple_arg_parser."""

import pytest

from simple_arg_parser.arguments import (
    Argument,
    ArgumentKind,
    Flag,
    Option,
    Positional,
    Variable,
)


class TestArgumentsUnit:
    """Unit tests for the Argument cases."""

    @pytest.mark.parametrize(
        "argument,expected_kind",
        [
            (Positional("file.txt"), ArgumentKind.POSITIONAL),
            (Flag("o"), ArgumentKind.FLAG),
            (Option("quiet"), ArgumentKind.OPTION),
            (Variable("output-type", "quiet"), ArgumentKind.VARIABLE),
        ],
    )
    def test_kind(self, argument, expected_kind):
        assert argument.kind is expected_kind
        assert isinstance(argument, Argument)

    def test_payload_attributes(self):
        assert Positional("file.txt").value == "file.txt"
        assert Flag("o").char == "o"
        assert Option("quiet").name == "quiet"
        variable = Variable("level", "3")
        assert variable.name == "level"
        assert variable.value == "3"

    def test_equality_requires_same_case(self):
        """Same payload in different cases must not compare equal."""
        assert Positional("x") == Positional("x")
        assert Positional("x") != Option("x")
        assert Option("x") != Flag("x")
        assert Variable("a", "b") != Variable("a", "c")

    def test_hashable(self):
        entries = {Positional("x"), Positional("x"), Option("x"), Flag("x")}
        assert len(entries) == 3

    @pytest.mark.parametrize(
        "argument,attribute",
        [
            (Positional("x"), "value"),
            (Flag("x"), "char"),
            (Option("x"), "name"),
            (Variable("x", "y"), "value"),
        ],
    )
    def test_immutable(self, argument, attribute):
        with pytest.raises(AttributeError):
            setattr(argument, attribute, "changed")
        with pytest.raises(AttributeError):
            delattr(argument, attribute)

    @pytest.mark.parametrize("char", ["", "ab"])
    def test_flag_requires_single_character(self, char):
        with pytest.raises(ValueError):
            Flag(char)

    def test_repr(self):
        assert repr(Positional("a.txt")) == "Positional(value='a.txt')"
        assert repr(Flag("v")) == "Flag(char='v')"
        assert repr(Option("quiet")) == "Option(name='quiet')"
        assert repr(Variable("k", "v")) == "Variable(name='k', value='v')"
