"""Helpers for the JSON values carried by HEADERS, QUERY and BODY sections.

Values are stringified and enumerated the way a JavaScript runtime would,
because they end up in URLs and headers.
"""

import json
import math
from decimal import Decimal
from urllib.parse import quote

from pydantic import JsonValue

# Characters encodeURIComponent leaves alone, on top of quote()'s own set.
_URI_COMPONENT_SAFE = "!*'()"

# Integers above this lose precision as JavaScript numbers.
_MAX_SAFE_INTEGER = 2 ** 53


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json_value(text: str) -> JsonValue:
    """Parse strict JSON text. Raises ValueError on malformed input."""
    return json.loads(text, parse_constant=_reject_constant)


def json_keys(value: JsonValue) -> list[str]:
    """Return the enumerable keys of a JSON value.

    Objects yield their keys in insertion order, lists and strings their
    indices, scalars nothing.
    """
    if isinstance(value, dict):
        return [str(k) for k in value]
    if isinstance(value, (list, str)):
        return [str(i) for i in range(len(value))]
    return []


def json_item(value: JsonValue, key: str) -> JsonValue:
    if isinstance(value, dict):
        return value[key]
    return value[int(key)]


def stringify(value: JsonValue) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, list):
        return ",".join("" if item is None else stringify(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def encode_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def format_number(value: int | float) -> str:
    """Format a number the way JavaScript's ``String(number)`` does.

    Plain decimal notation is used for magnitudes in [1e-6, 1e21), exponent
    notation (``1e+21``, ``1.5e-7``) outside it.
    """
    if isinstance(value, int) and abs(value) < _MAX_SAFE_INTEGER:
        return str(value)
    try:
        value = float(value)
    except OverflowError:
        value = math.inf if value > 0 else -math.inf
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)

    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return "0." + "0" * -n + digits
    e = n - 1
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
