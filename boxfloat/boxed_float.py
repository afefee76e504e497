#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Immutable boxed IEEE 754 single-precision value.

Boxed Float
===========

BoxedFloat wraps one binary32 value and gives it discrete-math friendly
semantics on top of native float behavior:

    ┌─────────────┬──────────────────────────┬──────────────────────────┐
    │             │ native float             │ BoxedFloat               │
    ├─────────────┼──────────────────────────┼──────────────────────────┤
    │ NaN == NaN  │ False                    │ True (any payload)       │
    │ +0.0 == -0.0│ True                     │ False                    │
    │ ordering    │ partial (NaN unordered)  │ total, NaN > +Infinity,  │
    │             │                          │ -0.0 < +0.0              │
    │ hash        │ hash(float)              │ canonical bit pattern    │
    └─────────────┴──────────────────────────┴──────────────────────────┘

Equality and hashing go through the canonical bit pattern (every NaN maps to
0x7FC00000), so instances are safe as dict keys and set members, and
sorted() over instances uses the total order.

Python has no native binary32 type: the stored value is a Python float that
is exactly representable in binary32. numpy.float32 scalars are accepted
anywhere a value is expected.

Usage:
    >>> BoxedFloat(1.0) < BoxedFloat(2.0)
    True
    >>> BoxedFloat.parse("NaN") == BoxedFloat.from_f64(float("nan"))
    True
    >>> BoxedFloat(0.0) == BoxedFloat(-0.0)
    False
    >>> str(BoxedFloat.from_f64(1e10))
    '1.0E10'
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar

import numpy as np

from boxfloat import config
from boxfloat.codecs.float_format import to_string
from boxfloat.codecs.float_parse import parse_float
from boxfloat.float_types import FloatBits, HexBits, OrderKey
from boxfloat.models.fp_bits import (
    bits_to_float,
    decimal_to_float32,
    float_to_bits,
    narrow_to_float32,
)
from boxfloat.models.ordering import compare, total_order_key
from boxfloat.utils.int_utils import saturating_truncate, to_signed32

__all__ = [
    "BoxedFloat",
    "MAX_VALUE",
    "MIN_VALUE",
    "MIN_NORMAL",
    "NaN",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "MAX_EXPONENT",
    "MIN_EXPONENT",
    "SIZE",
    "compare",
    "is_infinite_float",
    "is_nan_float",
    "parse_float",
    "to_bits",
    "to_hex_string",
    "to_string",
]

# Constants, derived once from the binary32 layout
MAX_VALUE = bits_to_float(config.FP_MAX_FINITE)
"""Largest finite value, (2 - 2^-23) * 2^127."""

MIN_VALUE = bits_to_float(config.FP_MIN_SUBNORMAL)
"""Smallest positive (subnormal) value, 2^-149."""

MIN_NORMAL = bits_to_float(config.FP_MIN_NORMAL)
"""Smallest positive normal value, 2^-126."""

NaN = bits_to_float(config.FP_CANONICAL_NAN)
POSITIVE_INFINITY = bits_to_float(config.FP_POS_INF)
NEGATIVE_INFINITY = bits_to_float(config.FP_NEG_INF)

MAX_EXPONENT = config.MAX_EXPONENT
MIN_EXPONENT = config.MIN_EXPONENT
SIZE = config.SIZE


def is_nan_float(f: float) -> bool:
    """Check whether a float is Not-a-Number (it is not equal to itself)."""
    return f != f


def is_infinite_float(f: float) -> bool:
    """Check whether a float is positive or negative infinity."""
    return f == POSITIVE_INFINITY or f == NEGATIVE_INFINITY


def to_bits(f: float) -> FloatBits:
    """Convert a float to the IEEE 754 single-precision bit layout.

    All NaN values are converted to a single canonical NaN (0x7FC00000).
    Signed zeros keep distinct patterns (0x00000000 and 0x80000000).
    """
    return float_to_bits(f)


def to_hex_string(f: float) -> HexBits:
    """Render to_bits(f) as lowercase hexadecimal without leading zeros.

    Example:
        >>> to_hex_string(-0.0)
        '80000000'
        >>> to_hex_string(0.0)
        '0'
    """
    return HexBits(f"{float_to_bits(f):x}")


def _coerce(value: Any) -> float:
    """Turn a constructor argument into a binary32-representable float."""
    if isinstance(value, bool):
        raise TypeError("BoxedFloat does not accept bool values")
    if isinstance(value, str):
        return parse_float(value)
    if isinstance(value, (float, np.floating)):
        return narrow_to_float32(float(value))
    if isinstance(value, numbers.Integral):
        # Exact integer -> binary32 rounding, no detour through binary64
        return bits_to_float(decimal_to_float32(Decimal(int(value))))
    if isinstance(value, numbers.Real):
        return narrow_to_float32(float(value))
    raise TypeError(
        f"BoxedFloat expects a real number or a string, not {type(value).__name__}"
    )


@dataclass(frozen=True, eq=False, repr=False)
class BoxedFloat:
    """The wrapper for a single-precision float value.

    Attributes:
        value: The binary32 value, as a Python float (set once, never mutated)
    """

    value: float

    MAX_VALUE: ClassVar[float] = MAX_VALUE
    MIN_VALUE: ClassVar[float] = MIN_VALUE
    MIN_NORMAL: ClassVar[float] = MIN_NORMAL
    NaN: ClassVar[float] = NaN
    POSITIVE_INFINITY: ClassVar[float] = POSITIVE_INFINITY
    NEGATIVE_INFINITY: ClassVar[float] = NEGATIVE_INFINITY
    MAX_EXPONENT: ClassVar[int] = MAX_EXPONENT
    MIN_EXPONENT: ClassVar[int] = MIN_EXPONENT
    SIZE: ClassVar[int] = SIZE

    def __post_init__(self) -> None:
        """Narrow (or parse) the constructor argument to binary32.

        Raises:
            FloatFormatError: value is a string that is not a float literal
            TypeError: value is neither a real number nor a string
        """
        object.__setattr__(self, "value", _coerce(self.value))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_f32(cls, f: float | np.float32) -> BoxedFloat:
        """Wrap a single-precision value verbatim."""
        return cls(f)

    @classmethod
    def from_f64(cls, d: float | np.float64) -> BoxedFloat:
        """Wrap a double-precision value narrowed to single precision.

        Narrowing rounds to nearest even, may overflow to ±Infinity and may
        flush tiny values to ±0.0. None of these is an error.
        """
        return cls(float(d))

    @classmethod
    def from_bits(cls, bits: int) -> BoxedFloat:
        """Wrap the value encoded by a 32-bit IEEE 754 pattern."""
        return cls(bits_to_float(bits))

    @classmethod
    def parse(cls, text: str) -> BoxedFloat:
        """Parse a float literal into a new instance.

        Raises:
            FloatFormatError: text is None, empty, or not a float literal
        """
        return cls(parse_float(text))

    @classmethod
    def value_of(cls, value: float | str) -> BoxedFloat:
        """Return an instance for a float value or a float literal string."""
        return cls(value)

    # ------------------------------------------------------------------
    # Static helpers over raw floats
    # ------------------------------------------------------------------

    @staticmethod
    def compare(float1: float, float2: float) -> int:
        """Compare two float values in total order (-1, 0 or 1)."""
        return compare(float1, float2)

    @staticmethod
    def is_nan_float(f: float) -> bool:
        """Check whether a float is Not-a-Number."""
        return is_nan_float(f)

    @staticmethod
    def is_infinite_float(f: float) -> bool:
        """Check whether a float is positive or negative infinity."""
        return is_infinite_float(f)

    @staticmethod
    def parse_float(text: str) -> float:
        """Parse a float literal into a binary32-valued Python float."""
        return parse_float(text)

    @staticmethod
    def to_bits(f: float) -> FloatBits:
        """Canonical single-precision bit pattern of a float."""
        return to_bits(f)

    @staticmethod
    def to_hex_string(f: float) -> HexBits:
        """Hexadecimal rendering of the canonical bit pattern."""
        return to_hex_string(f)

    @staticmethod
    def to_string_float(f: float) -> str:
        """Canonical decimal rendering of a float value."""
        return to_string(f)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_nan(self) -> bool:
        """Indicate whether this object is a Not-a-Number value."""
        return is_nan_float(self.value)

    def is_infinite(self) -> bool:
        """Indicate whether this object is positive or negative infinity."""
        return is_infinite_float(self.value)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def compare_to(self, other: BoxedFloat) -> int:
        """Compare this object to another in total order.

        There are two special cases:
            - NaN is equal to NaN and greater than any other value,
              including +Infinity
            - +0.0 is greater than -0.0

        Returns:
            -1, 0 or 1 as this value orders before, equal to or after other
        """
        return compare(self.value, other.value)

    def sort_key(self) -> OrderKey:
        """Integer key whose natural order is the total order."""
        return total_order_key(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BoxedFloat):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BoxedFloat):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BoxedFloat):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BoxedFloat):
            return NotImplemented
        return self.compare_to(other) >= 0

    # ------------------------------------------------------------------
    # Equality and hashing
    # ------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        """Compare canonical bit patterns for equality.

        Any two NaNs are equal, and +0.0 is not equal to -0.0.
        """
        return other is self or (
            isinstance(other, BoxedFloat)
            and to_hex_string(self.value) == to_hex_string(other.value)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoxedFloat):
            return NotImplemented
        return self.equals(other)

    def hash_code(self) -> int:
        """Signed 32-bit hash derived from the canonical bit pattern."""
        return to_signed32(to_bits(self.value))

    def __hash__(self) -> int:
        return self.hash_code()

    # ------------------------------------------------------------------
    # Numeric conversions (saturating truncation toward zero, NaN -> 0)
    # ------------------------------------------------------------------

    def byte_value(self) -> int:
        return saturating_truncate(self.value, config.BYTE_BITS)

    def short_value(self) -> int:
        return saturating_truncate(self.value, config.SHORT_BITS)

    def int_value(self) -> int:
        return saturating_truncate(self.value, config.INT_BITS)

    def long_value(self) -> int:
        return saturating_truncate(self.value, config.LONG_BITS)

    def float_value(self) -> float:
        """Gets the primitive value of this float."""
        return self.value

    def double_value(self) -> float:
        return self.value

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return self.long_value()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Canonical decimal rendering (see boxfloat.codecs.float_format)."""
        return to_string(self.value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BoxedFloat({self.to_string()})"
