"""Decomposition of command tokens into positional values and flags.

Handles:
- Long flags with a value (--name=value, --name value)
- Boolean long flags (--name, --no-name)
- Short flags and clusters (-x value, -abc, -n5, -o=value)
- The -- separator (everything after it is positional)

Flag values stay raw strings or booleans; casting happens when options are
bound to a route.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Union

FlagValue = Union[str, bool]

_LONG_WITH_VALUE = re.compile(r"^--([^=]+)=(.*)$", re.DOTALL)
_LONG_NEGATED = re.compile(r"^--no-(.+)$")
_LONG = re.compile(r"^--(.+)$")
_SHORT = re.compile(r"^-[^-]+")
_NUMERIC_REST = re.compile(r"-?\d+(\.\d*)?(e-?\d+)?$", re.ASCII)
_NON_WORD = re.compile(r"\W")


@dataclass
class Decomposition:
    """Positional values and flags of a token sequence.

    Attributes:
        positional: Non-flag tokens in order
        flags: Flag name to raw value (string or boolean)
    """

    positional: List[str] = field(default_factory=list)
    flags: Dict[str, FlagValue] = field(default_factory=dict)


def _looks_like_flag(token: str) -> bool:
    return token.startswith("-") and token != "-"


def _as_flag_value(token: str) -> FlagValue:
    if token in ("true", "false"):
        return token == "true"
    return token


def decompose(tokens: Sequence[str]) -> Decomposition:
    """Split tokens into positional values and a flag map.

    Args:
        tokens: Command tokens, already split into words.

    Returns:
        Decomposition with positional values and flags.

    Example:
        >>> decompose(["deploy", "prod", "--retries=3", "-v"])
        Decomposition(positional=['deploy', 'prod'], flags={'retries': '3', 'v': True})
    """
    result = Decomposition()
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if token == "--":
            result.positional.extend(tokens[i + 1 :])
            break

        if match := _LONG_WITH_VALUE.match(token):
            result.flags[match.group(1)] = match.group(2)

        elif match := _LONG_NEGATED.match(token):
            result.flags[match.group(1)] = False

        elif match := _LONG.match(token):
            key = match.group(1)
            following = tokens[i + 1] if i + 1 < len(tokens) else None
            if following is not None and not _looks_like_flag(following):
                result.flags[key] = _as_flag_value(following)
                i += 1
            else:
                result.flags[key] = True

        elif _SHORT.match(token):
            i += _decompose_short(token, tokens[i + 1 :], result.flags)

        else:
            result.positional.append(token)

        i += 1

    return result


def _decompose_short(
    token: str, following: Sequence[str], flags: Dict[str, FlagValue]
) -> int:
    """Decompose a short flag cluster into flags.

    Returns:
        Number of following tokens consumed as a value (0 or 1).
    """
    letters = token[1:]

    for j, letter in enumerate(letters[:-1]):
        rest = letters[j + 1 :]

        if rest == "-":
            flags[letter] = rest
            continue

        if letter.isalpha() and rest.startswith("="):
            flags[letter] = rest[1:]
            return 0

        if letter.isalpha() and _NUMERIC_REST.match(rest):
            flags[letter] = rest
            return 0

        if _NON_WORD.match(rest):
            flags[letter] = rest
            return 0

        flags[letter] = True

    last = letters[-1]
    if last == "-":
        return 0

    if following and not _looks_like_flag(following[0]):
        flags[last] = _as_flag_value(following[0])
        return 1

    flags[last] = True
    return 0
