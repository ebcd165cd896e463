"""Placeholder grammar for option declarations.

An option in a route template is declared either with a placeholder or as
a bare flag:

    --retries=<tries|type:number|alias:r|default:3>   PlaceholderSpec
    --name=                                           FlagSpec(STRING)
    --verbose                                         FlagSpec(BOOLEAN)

Inside a placeholder, `key:value` parameters set the type, alias or default
and a bare parameter sets the output name. When several bare parameters are
given the last one wins; an unknown key is an error.
"""

from typing import Union

from consoler.exceptions import InvalidOption
from consoler.models import FlagSpec, OptionSpec, OptionType, PlaceholderSpec

PLACEHOLDER_KEYS = ("type", "default", "alias")


def is_placeholder(pattern: Union[str, bool]) -> bool:
    """Is the pattern a bracketed `<...>` placeholder with content?"""
    return (
        isinstance(pattern, str)
        and len(pattern) > 2
        and pattern.startswith("<")
        and pattern.endswith(">")
    )


def parse_placeholder(pattern: Union[str, bool]) -> OptionSpec:
    """Parse an option pattern from a route template.

    Args:
        pattern: The template value of the option, as produced by the
            decomposer: a placeholder string, an empty string for `--opt=`
            or a boolean for `--opt`.

    Returns:
        PlaceholderSpec for the bracketed form, FlagSpec otherwise.

    Raises:
        InvalidOption: If a placeholder parameter uses an unknown key.
    """
    if not is_placeholder(pattern):
        if isinstance(pattern, bool):
            return FlagSpec(type=OptionType.BOOLEAN)
        return FlagSpec(type=OptionType.STRING)

    fields = {}
    for param in pattern[1:-1].split("|"):
        key, sep, value = param.partition(":")

        # Without a non-empty key and value the parameter is the name
        if not (sep and key and value):
            fields["name"] = param
            continue

        if key not in PLACEHOLDER_KEYS:
            raise InvalidOption(
                argument=key,
                message=f'Unknown placeholder key "{key}".',
                suggestion=f"Valid keys: {', '.join(PLACEHOLDER_KEYS)}",
            )
        fields[key] = value

    return PlaceholderSpec(**fields)
