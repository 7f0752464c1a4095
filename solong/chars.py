"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))
_INT_BITS = 32


def _code(c: int | str) -> int:
    """Return the code point of ``c``, given as a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _shift_case(c: int | str, low: str, high: str, delta: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    return _shift_case(c, "A", "Z", 32)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    return _shift_case(c, "a", "z", -32)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, as a C int conversion does."""
    span = 1 << _INT_BITS
    value %= span
    if value >= span // 2:
        value -= span
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    The result wraps to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with a leading minus if negative."""
    return str(int(n))