"""Quote-aware tokenization of route templates and command lines."""

from typing import List, Optional


def tokenize(text: str) -> List[str]:
    """Split text into words, keeping quoted sections together.

    Supports:
    - Double quotes: --flag "value with spaces"
    - Single quotes: --flag 'value with spaces'
    - Backticks: --flag `value with spaces`
    - Escapes: --flag "value with \\"nested\\" quotes"
    - Mixed quotes: --flag "outer 'inner' text"
    - Empty strings: --flag ""

    Example:
        >>> tokenize('deploy "my app" --retries=<tries|type:number>')
        ['deploy', 'my app', '--retries=<tries|type:number>']

        >>> tokenize("--message ''")
        ['--message', '']

    Returns:
        List of tokens with quotes stripped and values preserved.
    """
    tokens: List[str] = []
    current_token: List[str] = []
    in_quotes = False
    quote_char: Optional[str] = None
    escaped = False
    was_quoted = False  # an empty quoted section still makes a token

    for char in text:
        if escaped:
            current_token.append(char)
            escaped = False
            continue

        if char == "\\":
            escaped = True
            continue

        if char in ('"', "'", "`"):
            if not in_quotes:
                in_quotes = True
                quote_char = char
                was_quoted = True
            elif char == quote_char:
                in_quotes = False
                quote_char = None
            else:
                # Different quote type inside quotes - literal
                current_token.append(char)
            continue

        if char.isspace():
            if in_quotes:
                current_token.append(char)
            elif current_token or was_quoted:
                tokens.append("".join(current_token))
                current_token = []
                was_quoted = False
        else:
            current_token.append(char)
            was_quoted = False

    if current_token or was_quoted:
        tokens.append("".join(current_token))

    return tokens
