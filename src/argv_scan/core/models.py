"""Domain models for argv-scan.

* :class:`Slot` — a mutable destination written by the scanner's
  accessors.
* :class:`NumericType` — a frozen description of a numeric destination:
  which conversion applies and the full range of the type.

The module carries no I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Destination slot
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Slot(Generic[T]):
    """Mutable holder for an option's value.

    The slot is created by the caller with a default value and handed to
    an accessor inside the scan loop; a successful match overwrites (or,
    for counters, increments) :attr:`value`.
    """

    value: T


# ---------------------------------------------------------------------------
# Numeric destinations
# ---------------------------------------------------------------------------

class NumericKind(enum.Enum):
    """Which conversion function handles a numeric destination."""

    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOATING = "floating"


@dataclass(frozen=True, slots=True)
class NumericType:
    """A numeric destination type and its full inclusive range."""

    name: str
    """Short display name (e.g. ``int32``)."""

    kind: NumericKind
    """Conversion family used for this type."""

    minimum: int | float
    """Smallest representable value."""

    maximum: int | float
    """Largest representable value."""


def _signed(bits: int) -> NumericType:
    return NumericType(
        name=f"int{bits}",
        kind=NumericKind.SIGNED,
        minimum=-(1 << (bits - 1)),
        maximum=(1 << (bits - 1)) - 1,
    )


def _unsigned(bits: int) -> NumericType:
    return NumericType(
        name=f"uint{bits}",
        kind=NumericKind.UNSIGNED,
        minimum=0,
        maximum=(1 << bits) - 1,
    )


INT8: NumericType = _signed(8)
INT16: NumericType = _signed(16)
INT32: NumericType = _signed(32)
INT64: NumericType = _signed(64)

UINT8: NumericType = _unsigned(8)
UINT16: NumericType = _unsigned(16)
UINT32: NumericType = _unsigned(32)
UINT64: NumericType = _unsigned(64)

FLOAT: NumericType = NumericType(
    name="float",
    kind=NumericKind.FLOATING,
    minimum=-3.4028234663852886e38,
    maximum=3.4028234663852886e38,
)
"""IEEE-754 single precision."""

DOUBLE: NumericType = NumericType(
    name="double",
    kind=NumericKind.FLOATING,
    minimum=-sys.float_info.max,
    maximum=sys.float_info.max,
)
"""IEEE-754 double precision (Python ``float``)."""
