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

"""Total ordering over binary32 values.

Ordering Model
==============

Native float comparison is only a partial order: NaN is unordered and
+0.0 == -0.0. This module orders the *canonical* bit patterns instead:

    -Inf < negative finites < -0.0 < +0.0 < positive finites < +Inf < NaN

Every NaN canonicalizes to the positive quiet NaN first, so all NaNs compare
equal to each other and above +Inf regardless of sign or payload.

Key construction (sign-magnitude -> offset binary):
    - sign clear: set the sign bit, so positives sort above all negatives
    - sign set:   invert all bits, so larger magnitudes sort lower
"""

from __future__ import annotations

from boxfloat.config import FP_SIGN_MASK, MASK32
from boxfloat.float_types import OrderKey
from boxfloat.models.fp_bits import float_to_bits, is_negative

__all__ = ["order_key_from_bits", "total_order_key", "compare", "compare_bits"]


def order_key_from_bits(bits: int) -> OrderKey:
    """Map a canonical bit pattern to its unsigned total-order key.

    Args:
        bits: Canonical binary32 pattern (NaNs already canonicalized)

    Returns:
        Unsigned 32-bit key; integer order of keys is the float total order
    """
    if is_negative(bits):
        return OrderKey(~bits & MASK32)
    return OrderKey(bits | FP_SIGN_MASK)


def total_order_key(f: float) -> OrderKey:
    """Total-order key of a float, for use as sorted(..., key=total_order_key)."""
    return order_key_from_bits(float_to_bits(f))


def compare_bits(bits1: int, bits2: int) -> int:
    """Compare two canonical bit patterns in total order.

    Returns:
        -1, 0 or 1
    """
    key1 = order_key_from_bits(bits1)
    key2 = order_key_from_bits(bits2)
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def compare(float1: float, float2: float) -> int:
    """Compare two float values in total order.

    There are two special cases compared to native comparison:
        - NaN is equal to NaN and greater than every other value,
          including +Infinity
        - +0.0 is greater than -0.0

    Args:
        float1: First value
        float2: Second value

    Returns:
        -1 if float1 orders before float2, 0 if they are equal,
        1 if float1 orders after float2

    Example:
        >>> compare(1.0, 2.0)
        -1
        >>> compare(float("nan"), float("inf"))
        1
        >>> compare(0.0, -0.0)
        1
    """
    return compare_bits(float_to_bits(float1), float_to_bits(float2))
