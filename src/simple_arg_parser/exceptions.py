"""Custom exceptions for simple_arg_parser."""


class ArgParserError(Exception):
    """Base exception for simple_arg_parser errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ArgumentParseError(ArgParserError):
    """Raised in strict mode when a token cannot be classified cleanly."""

    def __init__(self, argument: str, message: str):
        super().__init__(f"Failed to parse argument '{argument}': {message}")
        self.argument = argument
