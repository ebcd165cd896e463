"""Template and command line parsing.

Provides quote-aware tokenization, flag decomposition and the placeholder
grammar used to declare options in route templates.
"""

from consoler.parsing.decomposer import Decomposition, decompose
from consoler.parsing.parser import parse_command
from consoler.parsing.placeholders import is_placeholder, parse_placeholder
from consoler.parsing.tokenizer import tokenize

__all__ = [
    "Decomposition",
    "decompose",
    "is_placeholder",
    "parse_command",
    "parse_placeholder",
    "tokenize",
]
