"""Route and result data models.

Provides:
- OptionType: Enum of option types a placeholder may declare
- ParsedCommand: A decomposed template or invocation
- PlaceholderSpec / FlagSpec: The two forms of an option declaration
- Command: The bound result of a parse
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

CastedScalar = Union[str, int, float, bool]
CastedValue = Union[CastedScalar, List[CastedScalar]]


class OptionType(str, Enum):
    """Supported option types for placeholder validation."""

    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    BOOLEAN = "boolean"

    @classmethod
    def is_supported(cls, name: str) -> bool:
        try:
            cls(name)
        except ValueError:
            return False
        return True

    @classmethod
    def of(cls, value: Any) -> "OptionType":
        """Runtime kind of an already casted value."""
        # bool first: it is a subclass of int
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, list):
            return cls.ARRAY
        return cls.STRING


@dataclass(frozen=True)
class ParsedCommand:
    """A command line split into name, positional arguments and flags.

    Built the same way from a route template and from an invocation. For a
    template, arguments hold `<name>`/`[name]` patterns and options hold
    placeholder patterns or flag-form sentinels.
    """

    command: Optional[str] = None
    arguments: Tuple[str, ...] = ()
    options: Dict[str, Union[str, bool]] = field(default_factory=dict)


@dataclass(frozen=True)
class PlaceholderSpec:
    """Option declared with a bracketed placeholder: `<name|type:number|alias:n|default:3>`."""

    name: Optional[str] = None
    type: Optional[str] = None
    alias: Optional[str] = None
    default: Optional[str] = None


@dataclass(frozen=True)
class FlagSpec:
    """Option declared without a placeholder.

    `--opt=` takes a string value, `--opt` is a boolean presence flag.
    """

    type: OptionType


OptionSpec = Union[PlaceholderSpec, FlagSpec]


@dataclass(frozen=True)
class Command:
    """Result of parsing an invocation against a route.

    Attributes:
        command: The matched command name, None when the route did not match
        argument: Positional arguments by name, always raw strings
        option: Options by output name, casted
    """

    command: Optional[str] = None
    argument: Dict[str, str] = field(default_factory=dict)
    option: Dict[str, CastedValue] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Command":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "argument": dict(self.argument),
            "option": dict(self.option),
        }
