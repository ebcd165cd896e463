"""Binding of invocation values to route arguments and options.

Arguments bind by position and stay raw strings. Options bind by the flag
name declared in the route, fall back to the placeholder alias, and are
casted and type-checked against the declaration.
"""

import re
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from consoler.casting import cast
from consoler.exceptions import InvalidOption, MissingArgument
from consoler.models import (
    CastedValue,
    Command,
    FlagSpec,
    OptionSpec,
    OptionType,
    ParsedCommand,
)
from consoler.parsing.placeholders import parse_placeholder

_REQUIRED = re.compile(r"<(.+)>")
_OPTIONAL = re.compile(r"\[(.+)\]")

_MISSING = object()


def bind(route: ParsedCommand, invocation: ParsedCommand) -> Command:
    """Bind an invocation to a route whose command name it matches.

    Raises:
        MissingArgument: If a required argument has no value.
        InvalidOption: If an option declaration or value is invalid.
    """
    return Command(
        command=invocation.command,
        argument=bind_arguments(route.arguments, invocation.arguments),
        option=bind_options(route.options, invocation.options),
    )


def bind_arguments(
    route_args: Sequence[str], invocation_args: Sequence[str]
) -> Dict[str, str]:
    """Pair argument patterns with positional values.

    Args:
        route_args: `<name>` (required) and `[name]` (optional) patterns.
        invocation_args: Positional values; extra values are ignored.

    Returns:
        Dict of argument name to raw value. Optional arguments without a
        value are left out.

    Raises:
        MissingArgument: If a required argument has no value.
    """
    args: Dict[str, str] = {}

    for index, pattern in enumerate(route_args):
        value = invocation_args[index] if index < len(invocation_args) else None

        if match := _REQUIRED.fullmatch(pattern):
            name = match.group(1)
            if not value:
                raise MissingArgument(
                    argument=name,
                    message=f"Argument <{name}> is required but missing.",
                )
            args[name] = value
            continue

        # Optional [name]; anything else is used as the name itself
        match = _OPTIONAL.fullmatch(pattern)
        name = match.group(1) if match else pattern
        if value:
            args[name] = value

    return args


def bind_options(
    route_options: Mapping[str, Union[str, bool]],
    invocation_flags: Mapping[str, Union[str, bool]],
) -> Dict[str, CastedValue]:
    """Pair option declarations with invocation flags.

    Args:
        route_options: Flag name to placeholder pattern or flag sentinel.
        invocation_flags: Flag name to raw value from the invocation.

    Returns:
        Dict of output name to casted value. Options that were not supplied
        and have no default are left out.

    Raises:
        InvalidOption: If a placeholder key or type is unknown, or a value
            does not match the declared type.
    """
    opts: Dict[str, CastedValue] = {}

    for option, pattern in route_options.items():
        spec = parse_placeholder(pattern)
        key = option if isinstance(spec, FlagSpec) else spec.name or option
        raw = _lookup(option, spec, invocation_flags)

        if raw is _MISSING:
            default = None if isinstance(spec, FlagSpec) else spec.default
            if default is not None:
                opts[key] = cast(default)
            continue

        value = cast(raw)
        _check_type(option, spec, value)
        opts[key] = value

    return opts


def _lookup(
    option: str, spec: OptionSpec, invocation_flags: Mapping[str, Any]
) -> Any:
    """Raw invocation value of an option, or _MISSING.

    Presence is decided by key, so False and empty strings count as supplied.
    """
    if option in invocation_flags:
        return invocation_flags[option]

    alias: Optional[str] = None if isinstance(spec, FlagSpec) else spec.alias
    if alias is not None and alias in invocation_flags:
        return invocation_flags[alias]

    return _MISSING


def _check_type(option: str, spec: OptionSpec, value: CastedValue) -> None:
    """Validate a supplied value against the declared or implicit type."""
    expected = spec.type
    if expected is None:
        return

    if not OptionType.is_supported(expected):
        raise InvalidOption(
            argument=option,
            message=f'Type {expected} isn\'t supported for option "{option}".',
            suggestion=f"Supported types: {', '.join(t.value for t in OptionType)}",
        )

    expected = OptionType(expected)
    received = OptionType.of(value)
    if received is not expected:
        if isinstance(spec, FlagSpec) and expected is OptionType.BOOLEAN:
            suggestion = f"--{option} is a flag and takes no value"
        else:
            suggestion = None
        raise InvalidOption(
            argument=option,
            message=(
                f'Expected type {expected.value} for option "{option}" '
                f'but received "{received.value}".'
            ),
            suggestion=suggestion,
        )
