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

"""Integer width conversions for float-to-integer casts.

INT UTILS
=========

This module provides the integer side of the numeric conversions:
- Sign extension for arbitrary bit widths
- Signed 32-bit folding (used for hash codes)
- Saturating float -> N-bit two's complement conversion

Float to integer conversion truncates toward zero and saturates at the
target width. NaN converts to 0.
"""

from __future__ import annotations

import math

from boxfloat.config import MASK32

__all__ = ["sign_extend", "to_signed32", "signed_bounds", "saturating_truncate"]


def sign_extend(val: int, bits: int) -> int:
    """Sign extend a value to a specified length in bits.

    Args:
        val: Value to sign-extend
        bits: Number of bits in the original value

    Returns:
        Sign-extended value as a Python int (unbounded)

    Example:
        >>> sign_extend(0xFF, 8)  # Extend 8-bit -1 to full width
        -1
        >>> sign_extend(0x7F, 8)  # Extend 8-bit +127 to full width
        127
    """
    sign = 1 << (bits - 1)
    return (val & (sign - 1)) - (val & sign)


def to_signed32(val: int) -> int:
    """Cast to signed 32-bit integer.

    Args:
        val: Value to convert (any int)

    Returns:
        Signed 32-bit integer representation
    """
    return sign_extend(val & MASK32, 32)


def signed_bounds(bits: int) -> tuple[int, int]:
    """Return (min, max) of a two's complement integer of the given width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def saturating_truncate(value: float, bits: int) -> int:
    """Convert a float to a signed integer of the given width.

    Args:
        value: Float to convert (any value, including NaN and infinities)
        bits: Target width in bits (8, 16, 32 or 64)

    Returns:
        value truncated toward zero and clamped to the target range;
        0 for NaN

    Example:
        >>> saturating_truncate(-3.9, 8)
        -3
        >>> saturating_truncate(300.0, 8)
        127
        >>> saturating_truncate(float("-inf"), 16)
        -32768
    """
    lo, hi = signed_bounds(bits)
    if math.isnan(value):
        return 0
    if value == math.inf:
        return hi
    if value == -math.inf:
        return lo
    return max(lo, min(hi, math.trunc(value)))
