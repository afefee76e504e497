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

"""Bit-level models of binary32 values.

These modules work on raw 32-bit patterns and plain Python floats. The
BoxedFloat class is a thin immutable wrapper over them.

Modules
-------
fp_bits
    Packing, narrowing and classification:
    - float <-> bit pattern conversion via struct
    - NaN canonicalization (every NaN -> 0x7FC00000)
    - Exact Decimal -> binary32 conversion with a single RNE rounding

ordering
    Total order over binary32 values:
    - Sign-magnitude -> offset-binary order keys
    - Three-way comparator (-1, 0, 1) with NaN above +Inf and -0.0 < +0.0

Usage
-----
::

    from boxfloat.models.fp_bits import float_to_bits
    from boxfloat.models.ordering import compare

    float_to_bits(float("nan"))  # 0x7FC00000
    compare(0.0, -0.0)           # 1
"""

from boxfloat.models.fp_bits import (
    bits_to_float,
    canonicalize_nan,
    float_to_bits,
    narrow_to_float32,
)
from boxfloat.models.ordering import compare, total_order_key

__all__ = [
    "bits_to_float",
    "canonicalize_nan",
    "float_to_bits",
    "narrow_to_float32",
    "compare",
    "total_order_key",
]
