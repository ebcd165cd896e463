"""Casting of raw flag values into typed values.

Flag values arrive from the decomposer as strings or booleans. Casting turns
them into numbers, booleans, trimmed strings or lists of those:

    >>> cast("1,2,3")
    [1, 2, 3]
    >>> cast(" 7.5 ")
    7.5
    >>> cast("false")
    False
    >>> cast(" name")
    'name'
"""

import math
import re
from typing import Any, Union

from consoler.models import CastedValue

# Decimal notation only: ASCII digits, no hex, no underscores, no nan/inf.
_NUMBER = re.compile(r"[+-]?(?:\d+(\.\d*)?|(\.\d+))([eE][+-]?\d+)?", re.ASCII)


def cast(value: Any) -> CastedValue:
    """Cast a raw value into its most specific type.

    Never raises. Values that are not strings (already casted values, the
    boolean of a presence flag, None) are returned unchanged.
    """
    if isinstance(value, str) and "," in value:
        return [cast(item) for item in value.split(",")]

    number = to_number(value)
    if number is not None:
        return number

    if value is True or value == "true":
        return True
    if value is False or value == "false":
        return False
    if isinstance(value, str):
        return value.strip()
    return value


def to_number(value: Any) -> Union[int, float, None]:
    """Parse a decimal number string, or None when it is not one."""
    if not isinstance(value, str):
        return None

    match = _NUMBER.fullmatch(value.strip())
    if match is None:
        return None

    text = match.group(0)
    if match.group(1) is None and match.group(2) is None and match.group(3) is None:
        try:
            return int(text)
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            return None

    number = float(text)
    # Exponents can overflow to inf
    if math.isinf(number):
        return None
    return number
