"""Argument classification for simple_arg_parser."""

import logging
from typing import Iterable

from .arguments import Argument, ArgumentKind, Flag, Option, Positional, Variable
from .environment_helper import debug_log
from .exceptions import ArgumentParseError
from .parsed_arguments import ParsedArguments
from .types import ArgsList, FlagList, TokenExpansion, VariableMap


class ArgumentProcessor:
    """Handles token classification."""

    @staticmethod
    def kind_of(token: str) -> ArgumentKind:
        """
        Decide which category a token belongs to.

        * no leading dash – positional (includes the empty string)
        * one leading dash – flag cluster
        * two leading dashes, no ``=`` – option
        * two leading dashes with ``=`` – variable
        """
        if not token.startswith("-"):
            return ArgumentKind.POSITIONAL
        if not token.startswith("--"):
            return ArgumentKind.FLAG
        if "=" not in token:
            return ArgumentKind.OPTION
        return ArgumentKind.VARIABLE

    @staticmethod
    def expand_token(token: str, strict: bool = False) -> TokenExpansion:
        """Return the classified entries a single token contributes."""
        kind = ArgumentProcessor.kind_of(token)

        if kind is ArgumentKind.POSITIONAL:
            return [Positional(token)]

        if kind is ArgumentKind.FLAG:
            # Bare '-' is an empty cluster.
            return [Flag(char) for char in token[1:]]

        if kind is ArgumentKind.OPTION:
            name = token[2:]
            if strict and not name:
                raise ArgumentParseError(token, "option name is empty")
            return [Option(name)]

        name, separator, value = token[2:].partition("=")
        if not separator:
            if strict:
                raise ArgumentParseError(token, "variable has no '=' separator")
            logging.warning(f"Dropping malformed variable argument '{token}'")
            return []
        if strict and not name:
            raise ArgumentParseError(token, "variable name is empty")
        return [Variable(name, value)]

    @staticmethod
    def parse_arguments(tokens: Iterable[str], strict: bool = False) -> ParsedArguments:
        """
        Classify every token in a single pass.

        Never raises unless ``strict`` is set, in which case an empty option
        name, an empty variable name, or a malformed variable raises
        ArgumentParseError.
        """
        arguments: list[Argument] = []
        positionals: ArgsList = []
        flags: FlagList = []
        options: ArgsList = []
        variables: VariableMap = {}

        for token in tokens:
            expansion = ArgumentProcessor.expand_token(token, strict=strict)
            debug_log(f"parse_arguments: {token!r} -> {expansion!r}")

            for argument in expansion:
                arguments.append(argument)
                if isinstance(argument, Positional):
                    positionals.append(argument.value)
                elif isinstance(argument, Flag):
                    flags.append(argument.char)
                elif isinstance(argument, Option):
                    options.append(argument.name)
                elif isinstance(argument, Variable):
                    variables[argument.name] = argument.value

        return ParsedArguments(arguments, positionals, flags, options, variables)


parse_arguments = ArgumentProcessor.parse_arguments
classify = ArgumentProcessor.parse_arguments
