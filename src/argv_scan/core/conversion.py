"""Bounds-checked conversion of option-argument text to numbers.

Three conversion functions, one per :class:`~argv_scan.core.models.NumericKind`:

1. **Signed** — base-10 integer, optional sign.
2. **Unsigned** — base-10 integer; a leading ``-`` is rejected outright
   instead of being wrapped into a large positive value.
3. **Floating** — decimal literal with optional fraction and exponent,
   or ``inf`` / ``infinity`` / ``nan``.

Leading whitespace is skipped; anything left over after the number is
a failure, as is a value outside the inclusive ``[minimum, maximum]``
bounds.  Every failure raises :class:`ConversionError`.
"""

from __future__ import annotations

import math
import re

from argv_scan.core.models import NumericKind, NumericType

_INTEGER_RE = re.compile(r"\s*([+-]?[0-9]+)\Z", re.ASCII)
_FLOATING_RE = re.compile(
    r"""
    \s*
    (
        [+-]?
        (?:
            (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
          | inf(?:inity)?
          | nan
        )
    )
    \Z
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE,
)
_LEADING_SIGN_RE = re.compile(r"\s*-", re.ASCII)


class ConversionError(ValueError):
    """Signals that option text could not be converted within bounds."""


# ---------------------------------------------------------------------------
# Integer conversions
# ---------------------------------------------------------------------------

def _parse_integer(text: str) -> int:
    match = _INTEGER_RE.match(text)
    if match is None:
        raise ConversionError(f"not an integer: {text!r}")
    try:
        return int(match.group(1), 10)
    except ValueError as exc:
        # int() refuses absurdly long digit strings.
        raise ConversionError(f"not an integer: {text!r}") from exc


def _check_bounds(value: int | float, minimum: int | float, maximum: int | float) -> None:
    if value < minimum or value > maximum:
        raise ConversionError(f"{value!r} is outside [{minimum}, {maximum}]")


def to_signed(text: str, minimum: int, maximum: int) -> int:
    """Convert *text* to a signed integer in ``[minimum, maximum]``."""
    value = _parse_integer(text)
    _check_bounds(value, minimum, maximum)
    return value


def to_unsigned(text: str, minimum: int, maximum: int) -> int:
    """Convert *text* to a non-negative integer in ``[minimum, maximum]``.

    A minus sign after any leading whitespace is invalid input, even for
    ``-0``.
    """
    if _LEADING_SIGN_RE.match(text):
        raise ConversionError(f"negative value for unsigned type: {text!r}")
    value = _parse_integer(text)
    _check_bounds(value, minimum, maximum)
    return value


# ---------------------------------------------------------------------------
# Floating-point conversion
# ---------------------------------------------------------------------------

def to_floating(text: str, minimum: float, maximum: float) -> float:
    """Convert *text* to a float in ``[minimum, maximum]``.

    A finite literal too large to represent is a range error.  NaN is
    never below or above a bound and is therefore accepted.
    """
    match = _FLOATING_RE.match(text)
    if match is None:
        raise ConversionError(f"not a number: {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ConversionError(f"out of range: {text!r}")
    _check_bounds(value, minimum, maximum)
    return value


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def convert(
    text: str,
    numeric_type: NumericType,
    minimum: int | float | None = None,
    maximum: int | float | None = None,
) -> int | float:
    """Convert *text* for a destination of *numeric_type*.

    Omitted bounds default to the type's full range; bounds wider than
    the type are narrowed to it.
    """
    low = numeric_type.minimum if minimum is None else max(minimum, numeric_type.minimum)
    high = numeric_type.maximum if maximum is None else min(maximum, numeric_type.maximum)

    if numeric_type.kind is NumericKind.SIGNED:
        return to_signed(text, low, high)
    if numeric_type.kind is NumericKind.UNSIGNED:
        return to_unsigned(text, low, high)
    return to_floating(text, low, high)
