"""Parsing of route templates and invocations into ParsedCommand records."""

from typing import Sequence, Union

from consoler.models import ParsedCommand
from consoler.parsing.decomposer import decompose
from consoler.parsing.tokenizer import tokenize


def parse_command(tokens: Union[str, Sequence[str]]) -> ParsedCommand:
    """Split a command line into its name, arguments and options.

    Args:
        tokens: Command tokens, or a raw string to tokenize first.

    Returns:
        ParsedCommand whose command is the first positional token (None
        when there is none).

    Example:
        >>> parse_command("deploy <env> --retries=<tries|type:number>")
        ParsedCommand(command='deploy', arguments=('<env>',), options={'retries': '<tries|type:number>'})
    """
    if isinstance(tokens, str):
        tokens = tokenize(tokens)

    parts = decompose(tokens)
    command = parts.positional[0] if parts.positional else None

    return ParsedCommand(
        command=command,
        arguments=tuple(parts.positional[1:]),
        options=dict(parts.flags),
    )
