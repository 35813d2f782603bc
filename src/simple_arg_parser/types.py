"""
Type aliases for simple_arg_parser.

Type Aliases:
    ArgsList: List of raw string tokens
    FlagList: List of single-character flags
    VariableMap: Dictionary mapping variable names to values
    TokenExpansion: Classified entries contributed by a single token
"""

from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:
    from .arguments import Argument

ArgsList = List[str]
"""List of raw tokens as passed to the program (e.g., ['file.txt', '-o'])."""

FlagList = List[str]
"""List of flag characters, each a string of length one (e.g., ['a', 'b'])."""

VariableMap = Dict[str, str]
"""Dictionary mapping variable names to their values (e.g., {'level': '3'})."""

TokenExpansion = List["Argument"]
"""Entries produced by classifying one token (empty, one, or one per flag)."""
