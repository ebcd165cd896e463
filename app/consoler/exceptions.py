"""Errors raised while binding an invocation to a route template.

Both kinds describe authoring or usage mistakes and abort the whole parse.
A command name that does not match the route is not an error.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ConsolerError(Exception):
    """Base error for route parsing failures.

    Attributes:
        argument: The argument, option or placeholder key at fault.
        message: Error message.
        suggestion: Optional suggestion for fixing the error.
    """

    argument: str
    message: str
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        result = self.message
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result


@dataclass
class MissingArgument(ConsolerError):
    """A required positional argument has no value in the invocation."""


@dataclass
class InvalidOption(ConsolerError):
    """An option is declared or supplied in a way the route cannot accept."""
