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

"""Shortest round-trip decimal rendering of binary32 values.

Float Format
============

The digit string is the shortest one that reads back to the same binary32
value (numpy's Dragon4 in unique mode on a float32 scalar). Layout:

    ┌────────────────────────┬──────────────────┬───────────────┐
    │ value                  │ layout           │ example       │
    ├────────────────────────┼──────────────────┼───────────────┤
    │ NaN, ±Inf              │ literal          │ -Infinity     │
    │ ±0                     │ literal          │ -0.0          │
    │ 1e-3 <= |v| < 1e7      │ plain            │ 100.5, 0.001  │
    │ otherwise              │ d.dddE<exp>      │ 1.4E-45       │
    └────────────────────────┴──────────────────┴───────────────┘

Both layouts always carry at least one digit after the point, and the
output is accepted verbatim by the parser in float_parse.
"""

from __future__ import annotations

import re
from decimal import Decimal

import numpy as np

from boxfloat.config import (
    FP_SIGN_MASK,
    PLAIN_NOTATION_MAX_EXP10,
    PLAIN_NOTATION_MIN_EXP10,
)
from boxfloat.exceptions import BoxedFloatError
from boxfloat.models.fp_bits import (
    bits_to_float,
    decimal_to_float32,
    float_to_bits,
    is_inf,
    is_nan,
    is_negative,
    is_zero,
)

__all__ = ["shortest_digits", "format_bits", "to_string"]

_SCIENTIFIC = re.compile(r"^(\d)(?:\.(\d*))?e([+-]\d+)$")


def _parse_scientific(text: str) -> tuple[str, int]:
    """Split numpy's d.ddde+XX rendering into (digits, exp10)."""
    match = _SCIENTIFIC.match(text)
    if match is None:
        raise BoxedFloatError(f"Unexpected scientific rendering: {text!r}")
    lead, frac, exp10 = match.groups()
    digits = (lead + (frac or "")).rstrip("0") or "0"
    return digits, int(exp10)


def shortest_digits(bits: int, min_digits: int = 1) -> tuple[str, int]:
    """Shortest decimal digits identifying a finite nonzero binary32 value.

    When the shortest string has fewer than min_digits significant digits,
    the value correctly rounded to min_digits digits is used instead, as
    long as it still reads back to the same binary32 value.

    Args:
        bits: Finite, nonzero binary32 pattern (sign is ignored)
        min_digits: Minimum number of significant digits to consider

    Returns:
        (digits, exp10) with no trailing zeros in digits, such that
        |value| reads back from d1.d2d3... * 10^exp10

    Example:
        >>> shortest_digits(0x3F800000)  # 1.0
        ('1', 0)
        >>> shortest_digits(0x00000001)  # smallest subnormal
        ('1', -45)
        >>> shortest_digits(0x00000001, min_digits=2)
        ('14', -45)
    """
    magnitude = np.float32(bits_to_float(bits & ~FP_SIGN_MASK))
    digits, exp10 = _parse_scientific(
        np.format_float_scientific(magnitude, unique=True, trim="k")
    )
    if len(digits) < min_digits:
        longer, longer_exp10 = _parse_scientific(
            np.format_float_scientific(
                magnitude, precision=min_digits - 1, unique=False, trim="k"
            )
        )
        scaled = Decimal(f"{longer}E{longer_exp10 - len(longer) + 1}")
        if decimal_to_float32(scaled) == bits & ~FP_SIGN_MASK:
            digits, exp10 = longer, longer_exp10
    return digits, exp10


def _plain(digits: str, exp10: int) -> str:
    """Render digits with the point placed by exp10 (no exponent)."""
    if exp10 >= 0:
        int_part = digits[: exp10 + 1].ljust(exp10 + 1, "0")
        frac_part = digits[exp10 + 1 :] or "0"
    else:
        int_part = "0"
        frac_part = "0" * (-exp10 - 1) + digits
    return f"{int_part}.{frac_part}"


def _scientific(digits: str, exp10: int) -> str:
    """Render digits as d.ddd followed by E and the decimal exponent."""
    return f"{digits[0]}.{digits[1:] or '0'}E{exp10}"


def format_bits(bits: int) -> str:
    """Render a binary32 bit pattern as its canonical decimal string."""
    if is_nan(bits):
        return "NaN"
    sign = "-" if is_negative(bits) else ""
    if is_inf(bits):
        return f"{sign}Infinity"
    if is_zero(bits):
        return f"{sign}0.0"

    digits, exp10 = shortest_digits(bits)
    if PLAIN_NOTATION_MIN_EXP10 <= exp10 < PLAIN_NOTATION_MAX_EXP10:
        return sign + _plain(digits, exp10)
    # E-notation carries at least two significant digits (1.4E-45, not 1.0E-45)
    digits, exp10 = shortest_digits(bits, min_digits=2)
    return sign + _scientific(digits, exp10)


def to_string(f: float) -> str:
    """Return a concise, human-readable description of a float value.

    The value is taken as binary32 (binary64 input is narrowed first).

    Example:
        >>> to_string(1.0)
        '1.0'
        >>> to_string(1e10)
        '1.0E10'
        >>> to_string(float("-inf"))
        '-Infinity'
    """
    return format_bits(float_to_bits(f))
