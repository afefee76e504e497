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

"""boxfloat: an immutable boxed IEEE 754 single-precision value.

This package provides BoxedFloat, a value type over one binary32 float with
a total order, canonical-bit-pattern equality and hashing, NaN
canonicalization, and exact string parsing/formatting round-trips.

Package Structure
-----------------

Subpackages:
    models
        Bit-level binary32 model (packing, narrowing, classification,
        exact Decimal conversion) and the total-order comparator

    codecs
        Canonical decimal rendering and float literal parsing

    utils
        Integer width conversions and structured debug logging

    tests
        pytest and hypothesis test modules

Modules:
    config
        Binary32 layout constants (bit masks, special patterns, thresholds)

    float_types
        Type aliases for bit patterns (FloatBits, HexBits, OrderKey)

    exceptions
        Exception hierarchy (FloatFormatError for rejected literals)

    boxed_float
        The BoxedFloat class, constants and module-level helpers

Quick Start
-----------
::

    from boxfloat import BoxedFloat

    values = [BoxedFloat(1.0), BoxedFloat.parse("NaN"), BoxedFloat(-0.0)]
    sorted(values)  # [BoxedFloat(-0.0), BoxedFloat(1.0), BoxedFloat(NaN)]
"""

import logging

from boxfloat.boxed_float import (
    MAX_EXPONENT,
    MAX_VALUE,
    MIN_EXPONENT,
    MIN_NORMAL,
    MIN_VALUE,
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    SIZE,
    BoxedFloat,
    NaN,
    compare,
    is_infinite_float,
    is_nan_float,
    parse_float,
    to_bits,
    to_hex_string,
    to_string,
)
from boxfloat.exceptions import BoxedFloatError, FloatFormatError

logging.getLogger("boxfloat").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BoxedFloat",
    "BoxedFloatError",
    "FloatFormatError",
    "compare",
    "is_infinite_float",
    "is_nan_float",
    "parse_float",
    "to_bits",
    "to_hex_string",
    "to_string",
    "MAX_VALUE",
    "MIN_VALUE",
    "MIN_NORMAL",
    "NaN",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "MAX_EXPONENT",
    "MIN_EXPONENT",
    "SIZE",
]
