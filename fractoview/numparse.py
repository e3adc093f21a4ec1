"""Strict parsing of decimal numbers given on the command line."""

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_MIN = -2147483648.0
_INT_MAX = 2147483647.0


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_double(text: str) -> float:
    """Parse a plain decimal number such as ``-0.4`` or ``+12.75``.

    Leading whitespace and one sign are allowed. A fractional part needs at
    least one character after the dot. Trailing characters of any kind, and
    magnitudes beyond the 32-bit integer range, raise ``ValueError``.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1

    sign = 1.0
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1.0
        pos += 1

    value = 0.0
    while pos < length and _is_digit(text[pos]):
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1

    if pos < length and text[pos] == "." and pos + 1 < length:
        pos += 1
        place = 1.0
        while pos < length and _is_digit(text[pos]):
            place *= 0.1
            value += (ord(text[pos]) - ord("0")) * place
            pos += 1

    if pos < length:
        raise ValueError(f"invalid number: {text!r}")
    if value > _INT_MAX or value < _INT_MIN:
        raise ValueError(f"number out of range: {text!r}")
    return value * sign