"""Consoler: match command lines against route templates.

A route template names a command, its positional arguments and its options:

    deploy <env> [region] --retries=<tries|type:number|default:3> --force

`Consoler(route, cli).parse()` binds an invocation to the template and
returns a Command with typed values.
"""

__title__ = "consoler"
__version__ = "0.1.0"

from consoler.casting import cast
from consoler.engine import Consoler, match, parse
from consoler.exceptions import ConsolerError, InvalidOption, MissingArgument
from consoler.models import (
    Command,
    FlagSpec,
    OptionSpec,
    OptionType,
    ParsedCommand,
    PlaceholderSpec,
)
from consoler.registry import Route, RouteRegistry

__all__ = [
    "Command",
    "Consoler",
    "ConsolerError",
    "FlagSpec",
    "InvalidOption",
    "MissingArgument",
    "OptionSpec",
    "OptionType",
    "ParsedCommand",
    "PlaceholderSpec",
    "Route",
    "RouteRegistry",
    "cast",
    "match",
    "parse",
]
