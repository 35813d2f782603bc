"""Environment and process argument access for simple_arg_parser."""

import os
import sys
from typing import Optional

from .types import ArgsList

TRUTHY_VALUES = ("1", "true", "yes", "on")


def env_flag_enabled(name: str) -> bool:
    """Check whether an environment variable holds a truthy value."""
    return os.environ.get(name, "").lower() in TRUTHY_VALUES


def debug_log(message: str) -> None:
    """Log debug message when SAP_DEBUG=1 is set."""
    if env_flag_enabled("SAP_DEBUG"):
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for reading the invocation and its settings."""

    @staticmethod
    def collect_args() -> ArgsList:
        """Get the tokens passed to the program after its own name."""
        return list(sys.argv[1:])

    @staticmethod
    def get_raw_args_string() -> str:
        """Get the invocation tokens joined by single spaces."""
        return " ".join(EnvironmentHelper.collect_args())

    @staticmethod
    def is_strict_mode(strict: Optional[bool] = None) -> bool:
        """Resolve strict mode, falling back to SAP_STRICT when not given."""
        if strict is not None:
            return strict
        return env_flag_enabled("SAP_STRICT")

    @staticmethod
    def collect_args_and_parse(strict: Optional[bool] = None):
        """Collect the invocation tokens and classify them."""
        from .argument_processor import ArgumentProcessor

        args = EnvironmentHelper.collect_args()
        debug_log(f"collect_args_and_parse: collected {len(args)} token(s)")
        return ArgumentProcessor.parse_arguments(
            args, strict=EnvironmentHelper.is_strict_mode(strict)
        )


collect_args = EnvironmentHelper.collect_args
get_raw_args_string = EnvironmentHelper.get_raw_args_string
collect_args_and_parse = EnvironmentHelper.collect_args_and_parse
