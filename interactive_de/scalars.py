# interactive_de/scalars.py
"""
Parsers for typed scalar prompts.

Each parser takes the raw line and returns the value or raises ValueError
with a message suitable for printing back to the user.
"""

import math
import re
from collections.abc import Callable

_INT_RE = re.compile(r"^[0-9]+$")
_FLOAT_RE = re.compile(
    r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
)
_FLOAT_SPECIALS = {
    "inf": math.inf,
    "infinity": math.inf,
    "nan": math.nan,
}


def parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError("provided string was not `true` or `false`")


def integer_type_name(bits: int, signed: bool) -> str:
    """Display name for an integer kind, e.g. 'i32' or 'u8'."""
    return f"{'i' if signed else 'u'}{bits}"


def integer_parser(bits: int, signed: bool) -> Callable[[str], int]:
    """
    Build a parser for a fixed-width integer.

    Accepts an optional sign followed by ASCII digits. A leading '-' is
    only valid for signed kinds. Values outside the width's range are
    rejected rather than wrapped.
    """
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1

    def parse(text: str) -> int:
        if not text:
            raise ValueError("cannot parse integer from empty string")
        digits = text
        negative = False
        if text[0] in "+-":
            negative = text[0] == "-"
            digits = text[1:]
            if not digits:
                raise ValueError("invalid digit found in string")
            if negative and not signed:
                raise ValueError("invalid digit found in string")
        if not _INT_RE.match(digits):
            raise ValueError("invalid digit found in string")
        value = int(digits)
        if negative:
            value = -value
        if value > high:
            raise ValueError("number too large to fit in target type")
        if value < low:
            raise ValueError("number too small to fit in target type")
        return value

    return parse


def float_type_name(bits: int) -> str:
    return f"f{bits}"


def parse_float(text: str) -> float:
    """Parse a float literal; no surrounding whitespace or digit separators."""
    if not text:
        raise ValueError("cannot parse float from empty string")
    body = text.lstrip("+-")
    if len(text) - len(body) > 1:
        raise ValueError("invalid float literal")
    special = _FLOAT_SPECIALS.get(body.lower())
    if special is not None:
        return -special if text.startswith("-") else special
    if not _FLOAT_RE.match(text):
        raise ValueError("invalid float literal")
    return float(text)
